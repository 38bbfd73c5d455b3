from cgtcalc.domain.asset_events import (
    AssetEvent,
    CapitalReturn,
    Dividend,
    Section104Holding,
    Split,
    Unsplit,
)
from cgtcalc.domain.disposal_match import (
    BedAndBreakfast,
    DisposalMatch,
    SameDay,
    Section104,
)
from cgtcalc.domain.rounding import round_expense, round_gain
from cgtcalc.domain.tax_year import DEFAULT_TAX_YEAR_RATES, TaxYear, TaxYearRates
from cgtcalc.domain.transactions import Transaction, TransactionToMatch
from cgtcalc.domain.value_objects import TransactionKind

__all__ = [
    "AssetEvent",
    "BedAndBreakfast",
    "CapitalReturn",
    "DEFAULT_TAX_YEAR_RATES",
    "DisposalMatch",
    "Dividend",
    "SameDay",
    "Section104",
    "Section104Holding",
    "Split",
    "TaxYear",
    "TaxYearRates",
    "Transaction",
    "TransactionKind",
    "TransactionToMatch",
    "Unsplit",
    "round_expense",
    "round_gain",
]
