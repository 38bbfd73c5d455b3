from datetime import date
from decimal import Decimal

import pytest

from cgtcalc.domain.disposal_match import DisposalMatch, SameDay, Section104
from cgtcalc.domain.tax_year import TaxYear, TaxYearRates
from cgtcalc.domain.transactions import Transaction, TransactionToMatch
from cgtcalc.domain.value_objects import TransactionKind


@pytest.fixture
def make_transaction():
    def _make(
        kind: str,
        day: str,
        asset: str,
        amount: str,
        price: str = "0",
        expenses: str = "0",
    ) -> Transaction:
        return Transaction(
            kind=TransactionKind(kind),
            date=date.fromisoformat(day),
            asset=asset,
            amount=Decimal(amount),
            price=Decimal(price),
            expenses=Decimal(expenses),
        )

    return _make


@pytest.fixture
def make_section104_match():
    def _make(disposal: Transaction | TransactionToMatch, cost_basis: str) -> DisposalMatch:
        if isinstance(disposal, Transaction):
            disposal = TransactionToMatch.from_transaction(disposal)
        return DisposalMatch(
            kind=Section104(
                amount_at_disposal=disposal.amount, cost_basis=Decimal(cost_basis)
            ),
            disposal=disposal,
        )

    return _make


@pytest.fixture
def make_same_day_match():
    def _make(
        disposal: Transaction | TransactionToMatch,
        acquisition: Transaction | TransactionToMatch,
    ) -> DisposalMatch:
        if isinstance(disposal, Transaction):
            disposal = TransactionToMatch.from_transaction(disposal)
        if isinstance(acquisition, Transaction):
            acquisition = TransactionToMatch.from_transaction(acquisition)
        return DisposalMatch(kind=SameDay(acquisition), disposal=disposal)

    return _make


@pytest.fixture
def sample_rates() -> dict[TaxYear, TaxYearRates]:
    return {
        TaxYear(2019): TaxYearRates(Decimal("12000"), Decimal("10"), Decimal("20")),
        TaxYear(2020): TaxYearRates(Decimal("12300"), Decimal("10"), Decimal("20")),
        TaxYear(2021): TaxYearRates(Decimal("12300"), Decimal("10"), Decimal("20")),
    }
