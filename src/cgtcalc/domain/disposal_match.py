"""A single matching of (part of) a disposal against an acquisition or pool."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import TypeAlias

from cgtcalc.domain.tax_year import TaxYear
from cgtcalc.domain.transactions import TransactionToMatch
from cgtcalc.exceptions import InvalidDisposalMatchError


@dataclass(frozen=True)
class SameDay:
    """Matched against an acquisition made on the day of the disposal."""

    acquisition: TransactionToMatch


@dataclass(frozen=True)
class BedAndBreakfast:
    """Matched against an acquisition within 30 days after the disposal."""

    acquisition: TransactionToMatch


@dataclass(frozen=True)
class Section104:
    """Matched against the pooled holding.

    amount_at_disposal is the size of the pool when the disposal happened,
    cost_basis the pool's cost per share.
    """

    amount_at_disposal: Decimal
    cost_basis: Decimal


MatchKind: TypeAlias = SameDay | BedAndBreakfast | Section104


@dataclass(frozen=True)
class DisposalMatch:
    kind: MatchKind
    disposal: TransactionToMatch
    restructure_multiplier: Decimal = Decimal("1")

    def __post_init__(self) -> None:
        if not self.disposal.kind.is_disposal:
            raise InvalidDisposalMatchError(
                f"Disposal side of a match must be a sale or gift, got {self.disposal.kind.value}",
                context={"asset": self.asset, "date": self.date.isoformat()},
            )
        # Gifts net to zero only when no disposal expenses are deducted.
        if self.is_gift and self.disposal.expenses != Decimal("0"):
            raise InvalidDisposalMatchError(
                f"Gift of {self.asset} on {self.date} cannot carry disposal expenses",
                context={"asset": self.asset, "expenses": str(self.disposal.expenses)},
            )

    @property
    def asset(self) -> str:
        return self.disposal.asset

    @property
    def date(self) -> date:
        return self.disposal.date

    @property
    def tax_year(self) -> TaxYear:
        return TaxYear.containing(self.disposal.date)

    @property
    def is_gift(self) -> bool:
        return self.disposal.is_gift

    @property
    def acquisition_cost_including_expenses(self) -> Decimal:
        kind = self.kind
        if isinstance(kind, (SameDay, BedAndBreakfast)):
            return kind.acquisition.value + kind.acquisition.expenses
        elif isinstance(kind, Section104):
            # Pool fees are already part of the cost basis.
            return self.disposal.amount * kind.cost_basis
        else:
            raise TypeError(f"Unknown disposal match kind: {kind!r}")

    @property
    def gross_disposal_proceeds(self) -> Decimal:
        """Disposal value before expenses; equal to the cost for gifts."""
        if self.is_gift:
            return self.acquisition_cost_including_expenses
        return self.disposal.value

    @property
    def gain(self) -> Decimal:
        """Gain (negative for a loss) on this part of the disposal."""
        return (
            self.gross_disposal_proceeds
            - self.disposal.expenses
            - self.acquisition_cost_including_expenses
        )


__all__ = [
    "BedAndBreakfast",
    "DisposalMatch",
    "MatchKind",
    "SameDay",
    "Section104",
]
