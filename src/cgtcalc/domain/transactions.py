from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from uuid import UUID, uuid4

from cgtcalc.domain.value_objects import TransactionKind
from cgtcalc.exceptions import InvalidTransactionError


def _as_decimal(value: Decimal | int | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        raise TypeError(f"Refusing to convert float {value!r} to Decimal")
    return Decimal(str(value))


@dataclass(frozen=True)
class Transaction:
    """A single buy, sell or gift of shares."""

    kind: TransactionKind
    date: date
    asset: str
    amount: Decimal
    price: Decimal
    expenses: Decimal = Decimal("0")
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", TransactionKind(self.kind))
        for name in ("amount", "price", "expenses"):
            object.__setattr__(self, name, _as_decimal(getattr(self, name)))

        if self.amount <= Decimal("0"):
            raise InvalidTransactionError(
                f"Transaction amount must be positive: {self.amount} of {self.asset}",
                context={"asset": self.asset, "amount": str(self.amount)},
            )
        if self.price < Decimal("0"):
            raise InvalidTransactionError(
                f"Transaction price cannot be negative: {self.price}",
                context={"asset": self.asset, "price": str(self.price)},
            )
        if self.expenses < Decimal("0"):
            raise InvalidTransactionError(
                f"Transaction expenses cannot be negative: {self.expenses}",
                context={"asset": self.asset, "expenses": str(self.expenses)},
            )
        if self.kind == TransactionKind.GIFT and self.expenses != Decimal("0"):
            raise InvalidTransactionError(
                f"Gift of {self.asset} on {self.date} cannot carry expenses",
                context={"asset": self.asset, "expenses": str(self.expenses)},
            )

    @property
    def value(self) -> Decimal:
        return self.amount * self.price

    @property
    def is_gift(self) -> bool:
        return self.kind == TransactionKind.GIFT


@dataclass(frozen=True)
class TransactionToMatch:
    """The part of a transaction taking part in a single match.

    expenses and offset are the pro-rata share of the underlying transaction
    for the matched amount. offset absorbs adjustments (e.g. capital returns)
    made to the acquisition or disposal while matching.
    """

    transaction: Transaction
    amount: Decimal
    price: Decimal
    expenses: Decimal
    offset: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        for name in ("amount", "price", "expenses", "offset"):
            object.__setattr__(self, name, _as_decimal(getattr(self, name)))

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> "TransactionToMatch":
        return cls(
            transaction=transaction,
            amount=transaction.amount,
            price=transaction.price,
            expenses=transaction.expenses,
        )

    @property
    def kind(self) -> TransactionKind:
        return self.transaction.kind

    @property
    def date(self) -> date:
        return self.transaction.date

    @property
    def asset(self) -> str:
        return self.transaction.asset

    @property
    def is_gift(self) -> bool:
        return self.transaction.is_gift

    @property
    def value(self) -> Decimal:
        return self.amount * self.price + self.offset

    def split(
        self, amount: Decimal
    ) -> tuple["TransactionToMatch", "TransactionToMatch"]:
        """Split off `amount` shares, returning (taken, remainder).

        Expenses and offset are shared pro rata; the two parts always sum
        back to the original figures.
        """
        amount = _as_decimal(amount)
        if not Decimal("0") < amount < self.amount:
            raise InvalidTransactionError(
                f"Cannot split {amount} from {self.amount} of {self.asset}",
                context={"asset": self.asset, "amount": str(amount)},
            )

        proportion = amount / self.amount
        taken_expenses = self.expenses * proportion
        taken_offset = self.offset * proportion
        taken = replace(
            self, amount=amount, expenses=taken_expenses, offset=taken_offset
        )
        remainder = replace(
            self,
            amount=self.amount - amount,
            expenses=self.expenses - taken_expenses,
            offset=self.offset - taken_offset,
        )
        return taken, remainder

    def restructured(self, multiplier: Decimal) -> "TransactionToMatch":
        """Apply a split/unsplit: more (or fewer) shares at the same value."""
        multiplier = _as_decimal(multiplier)
        if multiplier <= Decimal("0"):
            raise InvalidTransactionError(
                f"Restructure multiplier must be positive: {multiplier}",
                context={"asset": self.asset, "multiplier": str(multiplier)},
            )
        return replace(
            self, amount=self.amount * multiplier, price=self.price / multiplier
        )

    def with_offset(self, delta: Decimal) -> "TransactionToMatch":
        return replace(self, offset=self.offset + _as_decimal(delta))


__all__ = ["Transaction", "TransactionToMatch"]
