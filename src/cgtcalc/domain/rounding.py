"""Currency rounding used for HMRC figures.

Gains, losses and tax are rounded down to whole pounds; allowable costs are
rounded up.
"""

from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal, localcontext

_WHOLE_POUNDS = Decimal("1")


def _require_decimal(value: Decimal) -> None:
    if not isinstance(value, Decimal):
        raise TypeError(f"Expected Decimal, got {type(value).__name__}")


def _to_whole_pounds(value: Decimal, rounding: str) -> Decimal:
    _require_decimal(value)
    with localcontext() as ctx:
        # quantize needs every integer digit plus one for a carry.
        ctx.prec = max(ctx.prec, value.adjusted() + 2)
        return value.quantize(_WHOLE_POUNDS, rounding=rounding)


def round_gain(value: Decimal) -> Decimal:
    """Round toward negative infinity to zero decimal places."""
    return _to_whole_pounds(value, ROUND_FLOOR)


def round_expense(value: Decimal) -> Decimal:
    """Round toward positive infinity to zero decimal places."""
    return _to_whole_pounds(value, ROUND_CEILING)


__all__ = ["round_gain", "round_expense"]
