from cgtcalc.domain.disposal_match import (
    BedAndBreakfast,
    DisposalMatch,
    SameDay,
    Section104,
)
from cgtcalc.domain.tax_year import TaxYear, TaxYearRates
from cgtcalc.domain.transactions import Transaction, TransactionToMatch
from cgtcalc.domain.value_objects import TransactionKind
from cgtcalc.services.tax_year_aggregator import (
    CalculatorInput,
    CalculatorResult,
    DisposalResult,
    TaxYearAggregator,
    TaxYearSummary,
)

__all__ = [
    "BedAndBreakfast",
    "CalculatorInput",
    "CalculatorResult",
    "DisposalMatch",
    "DisposalResult",
    "SameDay",
    "Section104",
    "TaxYear",
    "TaxYearAggregator",
    "TaxYearRates",
    "TaxYearSummary",
    "Transaction",
    "TransactionKind",
    "TransactionToMatch",
]

__version__ = "0.1.0"
