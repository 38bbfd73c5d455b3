from cgtcalc.services.interfaces import DisposalMatcher, TaxYearAggregationService
from cgtcalc.services.tax_year_aggregator import (
    CalculatorInput,
    CalculatorResult,
    DisposalResult,
    TaxYearAggregator,
    TaxYearSummary,
    disposal_identity_of,
    tax_year_of,
)
from cgtcalc.services.text_report import TextReportRenderer

__all__ = [
    "CalculatorInput",
    "CalculatorResult",
    "DisposalMatcher",
    "DisposalResult",
    "TaxYearAggregationService",
    "TaxYearAggregator",
    "TaxYearSummary",
    "TextReportRenderer",
    "disposal_identity_of",
    "tax_year_of",
]
