"""Tax year aggregation of disposal matches.

Matches are grouped into one DisposalResult per disposal transaction and
folded into a TaxYearSummary per tax year, oldest year first. Net losses not
absorbed by the annual exemption are carried forward to later years; the
exemption itself is not.
"""

from collections.abc import Callable, Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TypeVar
from uuid import UUID

from cgtcalc.domain.asset_events import AssetEvent
from cgtcalc.domain.disposal_match import DisposalMatch
from cgtcalc.domain.rounding import round_expense, round_gain
from cgtcalc.domain.tax_year import TaxYear, TaxYearRates
from cgtcalc.domain.transactions import Transaction
from cgtcalc.exceptions import InvalidTransactionError, MissingTaxYearRatesError
from cgtcalc.logging_config import LogContext, get_logger
from cgtcalc.services.interfaces import DisposalMatcher, TaxYearAggregationService

logger = get_logger(__name__)

K = TypeVar("K", bound=Hashable)


def tax_year_of(match: DisposalMatch) -> TaxYear:
    return match.tax_year


def disposal_identity_of(match: DisposalMatch) -> UUID:
    return match.disposal.transaction.id


def group_by(
    matches: Iterable[DisposalMatch], key: Callable[[DisposalMatch], K]
) -> dict[K, list[DisposalMatch]]:
    """Group matches by key, keeping first-seen order of keys and matches."""
    groups: dict[K, list[DisposalMatch]] = {}
    for match in matches:
        groups.setdefault(key(match), []).append(match)
    return groups


@dataclass(frozen=True)
class DisposalResult:
    """One disposal transaction and every match that satisfies it."""

    disposal: Transaction
    disposal_matches: tuple[DisposalMatch, ...]
    net_gain: Decimal = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "disposal_matches", tuple(self.disposal_matches))
        total = sum((match.gain for match in self.disposal_matches), Decimal("0"))
        object.__setattr__(self, "net_gain", round_gain(total))

    @property
    def gain(self) -> Decimal:
        """Net gain, or zero for a loss-making disposal."""
        if self.net_gain < Decimal("0"):
            return Decimal("0")
        return self.net_gain

    @property
    def loss(self) -> Decimal:
        """Net loss as a positive figure, or zero."""
        if self.net_gain < Decimal("0"):
            return -self.net_gain
        return Decimal("0")

    @property
    def allowable_costs(self) -> Decimal:
        """Acquisition costs (with their expenses) plus the disposal's own expenses."""
        return self.disposal.expenses + sum(
            (match.acquisition_cost_including_expenses for match in self.disposal_matches),
            Decimal("0"),
        )

    @property
    def gross_proceeds(self) -> Decimal:
        return sum(
            (match.gross_disposal_proceeds for match in self.disposal_matches),
            Decimal("0"),
        )

    @property
    def is_gift(self) -> bool:
        return self.disposal.is_gift

    @property
    def disposal_unit_price(self) -> Decimal:
        """Sale price per share; for gifts derived from the matched cost."""
        if not self.is_gift:
            return self.disposal.price
        if self.disposal.amount == Decimal("0"):
            raise InvalidTransactionError(
                f"Cannot derive unit price for gift of zero {self.disposal.asset}",
                context={"asset": self.disposal.asset},
            )
        return self.gross_proceeds / self.disposal.amount


@dataclass(frozen=True)
class TaxYearSummary:
    tax_year: TaxYear
    number_of_disposals: int
    proceeds: Decimal
    total_allowable_costs: Decimal
    total_gains_before_losses: Decimal
    total_losses: Decimal
    net_gain: Decimal
    exemption: Decimal
    carry_forward_loss: Decimal
    taxable_gain: Decimal
    basic_rate_tax: Decimal
    higher_rate_tax: Decimal
    disposal_results: tuple[DisposalResult, ...]

    @property
    def disposal_matches(self) -> list[DisposalMatch]:
        return [
            match
            for result in self.disposal_results
            for match in result.disposal_matches
        ]


@dataclass(frozen=True)
class CalculatorInput:
    transactions: tuple[Transaction, ...] = ()
    asset_events: tuple[AssetEvent, ...] = ()


@dataclass(frozen=True)
class CalculatorResult:
    input: CalculatorInput
    tax_year_summaries: tuple[TaxYearSummary, ...]


class TaxYearAggregator(TaxYearAggregationService):
    """Folds disposal matches into per tax year summaries."""

    def __init__(self, tax_year_rates: Mapping[TaxYear, TaxYearRates]) -> None:
        self._tax_year_rates = dict(tax_year_rates)

    def rates_for(self, tax_year: TaxYear) -> TaxYearRates:
        try:
            return self._tax_year_rates[tax_year]
        except KeyError:
            raise MissingTaxYearRatesError(tax_year) from None

    def summarise(self, matches: Iterable[DisposalMatch]) -> list[TaxYearSummary]:
        by_tax_year = group_by(matches, tax_year_of)
        tax_years = sorted(by_tax_year)

        # Validate up front so a missing year never yields partial output.
        for tax_year in tax_years:
            self.rates_for(tax_year)

        summaries: list[TaxYearSummary] = []
        carry_forward_loss = Decimal("0")
        for tax_year in tax_years:
            with LogContext(tax_year=str(tax_year)):
                carry_forward_loss, summary = self._summarise_year(
                    carry_forward_loss, tax_year, by_tax_year[tax_year]
                )
            summaries.append(summary)

        logger.info(
            "tax_years_aggregated",
            tax_years=[str(tax_year) for tax_year in tax_years],
            carry_forward_loss=str(carry_forward_loss),
        )
        return summaries

    def calculate(
        self, calculator_input: CalculatorInput, matches: Iterable[DisposalMatch]
    ) -> CalculatorResult:
        return CalculatorResult(
            input=calculator_input,
            tax_year_summaries=tuple(self.summarise(matches)),
        )

    def run(
        self, calculator_input: CalculatorInput, matcher: DisposalMatcher
    ) -> CalculatorResult:
        """Match the input's transactions with `matcher` and aggregate the result."""
        matches = matcher.match(
            calculator_input.transactions, calculator_input.asset_events
        )
        return self.calculate(calculator_input, matches)

    def _summarise_year(
        self,
        carry_forward_loss: Decimal,
        tax_year: TaxYear,
        matches: list[DisposalMatch],
    ) -> tuple[Decimal, TaxYearSummary]:
        rates = self.rates_for(tax_year)

        disposal_results = sorted(
            (
                DisposalResult(
                    disposal=disposal_matches[0].disposal.transaction,
                    disposal_matches=tuple(disposal_matches),
                )
                for disposal_matches in group_by(matches, disposal_identity_of).values()
            ),
            key=lambda result: (result.disposal.date, result.disposal.asset),
        )

        zero = Decimal("0")
        net_gain = sum((r.gain - r.loss for r in disposal_results), zero)
        total_gains_before_losses = sum((r.gain for r in disposal_results), zero)
        total_losses = sum((r.loss for r in disposal_results), zero)
        total_proceeds = sum((r.gross_proceeds for r in disposal_results), zero)
        total_allowable_costs = sum((r.allowable_costs for r in disposal_results), zero)

        gain_above_exemption = max(net_gain - rates.exemption, zero)
        if gain_above_exemption != zero:
            loss_used = min(gain_above_exemption, carry_forward_loss)
            taxable_gain = gain_above_exemption - loss_used
            carry_forward_loss -= loss_used
        else:
            taxable_gain = zero
            if net_gain < zero:
                carry_forward_loss -= net_gain

        summary = TaxYearSummary(
            tax_year=tax_year,
            number_of_disposals=len(disposal_results),
            proceeds=round_gain(total_proceeds),
            total_allowable_costs=round_expense(total_allowable_costs),
            total_gains_before_losses=total_gains_before_losses,
            total_losses=total_losses,
            net_gain=net_gain,
            exemption=rates.exemption,
            carry_forward_loss=carry_forward_loss,
            taxable_gain=taxable_gain,
            basic_rate_tax=round_gain(taxable_gain * rates.basic_rate / Decimal("100")),
            higher_rate_tax=round_gain(taxable_gain * rates.higher_rate / Decimal("100")),
            disposal_results=tuple(disposal_results),
        )

        logger.debug(
            "tax_year_summarised",
            disposals=summary.number_of_disposals,
            net_gain=str(net_gain),
            taxable_gain=str(taxable_gain),
            carry_forward_loss=str(carry_forward_loss),
        )
        return carry_forward_loss, summary


__all__ = [
    "CalculatorInput",
    "CalculatorResult",
    "DisposalResult",
    "TaxYearAggregator",
    "TaxYearSummary",
    "disposal_identity_of",
    "group_by",
    "tax_year_of",
]
