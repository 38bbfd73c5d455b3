from decimal import Decimal

import pytest

from cgtcalc.domain.rounding import round_expense, round_gain


class TestRoundGain:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("190.99", "190"),
            ("190.01", "190"),
            ("-0.5", "-1"),
            ("-2000.01", "-2001"),
            ("0.4", "0"),
        ],
    )
    def test_rounds_toward_negative_infinity(self, value: str, expected: str) -> None:
        assert round_gain(Decimal(value)) == Decimal(expected)

    @pytest.mark.parametrize("value", ["0", "190", "-2000", "190.00"])
    def test_whole_pounds_unchanged(self, value: str) -> None:
        assert round_gain(Decimal(value)) == Decimal(value)

    @pytest.mark.parametrize("value", ["0.001", "99.999", "-3.2", "1234.5678"])
    def test_never_exceeds_input(self, value: str) -> None:
        assert round_gain(Decimal(value)) <= Decimal(value)

    def test_rejects_float(self) -> None:
        with pytest.raises(TypeError):
            round_gain(1.5)  # type: ignore[arg-type]

    def test_beyond_default_context_precision(self) -> None:
        value = Decimal("12345678901234567890123456789.5")

        assert round_gain(value) == Decimal("12345678901234567890123456789")
        assert round_gain(Decimal("-12345678901234567890123456789.5")) == Decimal(
            "-12345678901234567890123456790"
        )


class TestRoundExpense:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("510.01", "511"),
            ("510.99", "511"),
            ("-0.5", "0"),
            ("0.0001", "1"),
        ],
    )
    def test_rounds_toward_positive_infinity(self, value: str, expected: str) -> None:
        assert round_expense(Decimal(value)) == Decimal(expected)

    @pytest.mark.parametrize("value", ["0", "510", "-7"])
    def test_whole_pounds_unchanged(self, value: str) -> None:
        assert round_expense(Decimal(value)) == Decimal(value)

    @pytest.mark.parametrize("value", ["0.001", "99.999", "-3.2", "1234.5678"])
    def test_never_below_input(self, value: str) -> None:
        assert round_expense(Decimal(value)) >= Decimal(value)

    def test_beyond_default_context_precision(self) -> None:
        value = Decimal("99999999999999999999999999999.5")

        assert round_expense(value) == Decimal("100000000000000000000000000000")
