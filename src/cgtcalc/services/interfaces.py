from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from cgtcalc.domain.asset_events import AssetEvent
from cgtcalc.domain.disposal_match import DisposalMatch
from cgtcalc.domain.transactions import Transaction

if TYPE_CHECKING:
    from cgtcalc.services.tax_year_aggregator import (
        CalculatorInput,
        CalculatorResult,
        TaxYearSummary,
    )


class DisposalMatcher(ABC):
    """Applies the same-day, bed-and-breakfast and Section 104 rules.

    Implementations live outside this package; the aggregator only consumes
    the matches they produce.
    """

    @abstractmethod
    def match(
        self,
        transactions: Sequence[Transaction],
        asset_events: Sequence[AssetEvent],
    ) -> list[DisposalMatch]:
        pass


class TaxYearAggregationService(ABC):
    @abstractmethod
    def summarise(self, matches: Iterable[DisposalMatch]) -> list[TaxYearSummary]:
        pass

    @abstractmethod
    def calculate(
        self, calculator_input: CalculatorInput, matches: Iterable[DisposalMatch]
    ) -> CalculatorResult:
        pass


__all__ = ["DisposalMatcher", "TaxYearAggregationService"]
