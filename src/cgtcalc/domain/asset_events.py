"""Corporate actions and the Section 104 holding they adjust."""

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from typing import TypeAlias

from cgtcalc.exceptions import AssetEventError


@dataclass(frozen=True)
class CapitalReturn:
    """Return of capital on `amount` shares, reducing the pool cost by `value`."""

    amount: Decimal
    value: Decimal


@dataclass(frozen=True)
class Dividend:
    """Accumulated (reinvested) dividend on `amount` shares, adding `value` to cost."""

    amount: Decimal
    value: Decimal


@dataclass(frozen=True)
class Split:
    multiplier: Decimal


@dataclass(frozen=True)
class Unsplit:
    multiplier: Decimal


AssetEventKind: TypeAlias = CapitalReturn | Dividend | Split | Unsplit


@dataclass(frozen=True)
class AssetEvent:
    kind: AssetEventKind
    date: date
    asset: str


@dataclass(frozen=True)
class Section104Holding:
    """Pooled shares of one asset held at a weighted-average cost."""

    asset: str
    amount: Decimal = Decimal("0")
    cost: Decimal = Decimal("0")

    @property
    def cost_basis(self) -> Decimal:
        """Cost per share; zero for an empty pool."""
        if self.amount == Decimal("0"):
            return Decimal("0")
        return self.cost / self.amount

    @property
    def is_empty(self) -> bool:
        return self.amount == Decimal("0")

    def acquire(self, amount: Decimal, cost: Decimal) -> "Section104Holding":
        return replace(self, amount=self.amount + amount, cost=self.cost + cost)

    def dispose(self, amount: Decimal) -> tuple["Section104Holding", Decimal]:
        """Remove `amount` shares; returns the new holding and the cost basis used."""
        if amount > self.amount:
            raise AssetEventError(
                self.asset,
                f"Cannot dispose of {amount} {self.asset}: only {self.amount} held",
            )
        cost_basis = self.cost_basis
        remaining = self.amount - amount
        remaining_cost = (
            Decimal("0") if remaining == Decimal("0") else self.cost - amount * cost_basis
        )
        return replace(self, amount=remaining, cost=remaining_cost), cost_basis

    def apply_event(self, event: AssetEvent) -> "Section104Holding":
        if event.asset != self.asset:
            raise AssetEventError(
                self.asset,
                f"Event for {event.asset} cannot be applied to {self.asset} holding",
            )

        kind = event.kind
        if isinstance(kind, (CapitalReturn, Dividend)):
            if kind.amount != self.amount:
                raise AssetEventError(
                    self.asset,
                    f"Event on {event.date} covers {kind.amount} {self.asset} "
                    f"but {self.amount} are held",
                )
            if isinstance(kind, CapitalReturn):
                return replace(self, cost=self.cost - kind.value)
            return replace(self, cost=self.cost + kind.value)
        elif isinstance(kind, Split):
            return replace(self, amount=self.amount * kind.multiplier)
        elif isinstance(kind, Unsplit):
            return replace(self, amount=self.amount / kind.multiplier)
        else:
            raise TypeError(f"Unknown asset event kind: {kind!r}")


__all__ = [
    "AssetEvent",
    "AssetEventKind",
    "CapitalReturn",
    "Dividend",
    "Section104Holding",
    "Split",
    "Unsplit",
]
