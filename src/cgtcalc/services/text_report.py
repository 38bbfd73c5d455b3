"""Plain text rendering of a CalculatorResult."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from cgtcalc.domain.asset_events import CapitalReturn, Dividend, Split, Unsplit
from cgtcalc.domain.disposal_match import (
    BedAndBreakfast,
    DisposalMatch,
    SameDay,
    Section104,
)
from cgtcalc.domain.transactions import TransactionToMatch
from cgtcalc.domain.value_objects import TransactionKind
from cgtcalc.services.tax_year_aggregator import CalculatorResult, DisposalResult

SUMMARY_HEADERS = [
    "Tax year",
    "No. Disposals",
    "Proceeds",
    "Allowable Costs",
    "Gain b/f Losses",
    "Losses",
    "Net Gain",
    "Exemption",
    "Loss carry",
    "Taxable gain",
    "Tax (basic)",
    "Tax (higher)",
]

SEPARATOR = "________________________________________"


def format_currency(amount: Decimal, places: int = 2) -> str:
    """Format as pounds, rounded half-up and without trailing zeros."""
    rounded = amount.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    if rounded == 0:
        return "£0"
    return f"£{rounded.normalize():f}"


def format_date(day: date) -> str:
    return day.strftime("%d/%m/%Y")


def format_amount(value: Decimal) -> str:
    if value == 0:
        return "0"
    return f"{value.normalize():f}"


class TextReportRenderer:
    """Renders summary, per-disposal detail, transactions and asset events."""

    def __init__(self, result: CalculatorResult) -> None:
        self._result = result

    def render(self) -> str:
        sections = [
            "# SUMMARY\n\n" + self._summary_table(),
            "# TAX YEAR DETAILS\n\n" + self._details(),
            "# TRANSACTIONS\n\n" + self._transactions(),
            "# ASSET EVENTS\n\n" + self._asset_events(),
        ]
        return "\n\n".join(section.rstrip("\n") for section in sections) + "\n"

    def _summary_table(self) -> str:
        rows = [
            [
                str(summary.tax_year),
                str(summary.number_of_disposals),
                format_currency(summary.proceeds),
                format_currency(summary.total_allowable_costs),
                format_currency(summary.total_gains_before_losses),
                format_currency(summary.total_losses),
                format_currency(summary.net_gain),
                format_currency(summary.exemption),
                format_currency(summary.carry_forward_loss),
                format_currency(summary.taxable_gain),
                format_currency(summary.basic_rate_tax),
                format_currency(summary.higher_rate_tax),
            ]
            for summary in self._result.tax_year_summaries
        ]

        widths = [len(header) for header in SUMMARY_HEADERS]
        for row in rows:
            widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

        def build(cells: list[str]) -> str:
            return "   ".join(cell.ljust(width) for cell, width in zip(cells, widths))

        header = build(SUMMARY_HEADERS)
        lines = [header, "=" * len(header)]
        lines.extend(build(row) for row in rows)
        return "\n".join(lines) + "\n"

    def _details(self) -> str:
        output = ""
        for summary in self._result.tax_year_summaries:
            output += f"## TAX YEAR {summary.tax_year}\n\n"
            for count, result in enumerate(summary.disposal_results, start=1):
                output += f"{count}) {self._disposal_headline(result)}\n"
                output += "\nMatches with holding(s):\n"
                for match in result.disposal_matches:
                    output += f"  • {self._match_details(match)}\n"
                output += f"\nCalculation: {self._calculation(result)}\n"
                output += f"\n{SEPARATOR}\n\n"
        return output

    def _disposal_headline(self, result: DisposalResult) -> str:
        disposal = result.disposal
        headline = (
            f"{disposal.kind.value} {format_amount(disposal.amount)} shares of {disposal.asset}"
            f" at {format_currency(result.disposal_unit_price, 5)} per share"
            f" on {format_date(disposal.date)} for "
        )
        if result.loss != 0:
            return headline + f"LOSS of {format_currency(result.loss)}"
        if result.gain != 0:
            return headline + f"GAIN of {format_currency(result.gain)}"
        return headline + "NO NET GAIN"

    @staticmethod
    def _match_details(match: DisposalMatch) -> str:
        kind = match.kind
        if isinstance(kind, SameDay):
            return "SAME DAY: " + TextReportRenderer._acquisition_details(kind.acquisition)
        elif isinstance(kind, BedAndBreakfast):
            output = "BED & BREAKFAST: " + TextReportRenderer._acquisition_details(kind.acquisition)
            if match.restructure_multiplier != 1:
                output += (
                    f" with restructure multiplier {format_amount(match.restructure_multiplier)}"
                )
            return output
        elif isinstance(kind, Section104):
            return (
                f"SECTION 104: {format_amount(kind.amount_at_disposal)} shares "
                f"at cost basis of {format_currency(kind.cost_basis, 5)}"
            )
        else:
            raise TypeError(f"Unknown disposal match kind: {kind!r}")

    @staticmethod
    def _acquisition_details(acquisition: TransactionToMatch) -> str:
        output = (
            f"{format_amount(acquisition.amount)} shares bought on "
            f"{format_date(acquisition.date)} at {format_currency(acquisition.price)}"
        )
        if acquisition.offset != 0:
            output += f" with offset of {format_currency(acquisition.offset)}"
        return output

    @staticmethod
    def _calculation(result: DisposalResult) -> str:
        disposal = result.disposal
        lines = [
            "",
            " • PROCEEDS:",
            f"\t{format_amount(disposal.amount)} shares x "
            f"{format_currency(result.disposal_unit_price)} = {format_currency(result.gross_proceeds)}",
            " • COSTS:",
            f"\tDisposal fees: {format_currency(disposal.expenses)}",
        ]
        for match in result.disposal_matches:
            kind = match.kind
            cost = format_currency(match.acquisition_cost_including_expenses)
            if isinstance(kind, (SameDay, BedAndBreakfast)):
                acquisition = kind.acquisition
                line = (
                    f"\tAcquisition cost: ({format_amount(acquisition.amount)} shares x "
                    f"{format_amount(acquisition.price)}) + "
                    f"{format_currency(acquisition.expenses)} fees = {cost}"
                )
                if acquisition.offset != 0:
                    line += f" + {format_amount(acquisition.offset)}"
                lines.append(line)
            elif isinstance(kind, Section104):
                lines.append(
                    f"\tAcquisition cost: {format_amount(match.disposal.amount)} shares x "
                    f"{format_currency(kind.cost_basis, 5)} = {cost}"
                )
            else:
                raise TypeError(f"Unknown disposal match kind: {kind!r}")
        lines.extend(
            [
                "",
                f"Total proceeds = {format_currency(result.gross_proceeds)}",
                f"Total costs    = {format_currency(result.allowable_costs)}",
                "",
                f"Total gain     = {format_currency(result.gain)}",
                f"Total loss     = {format_currency(result.loss)}",
            ]
        )
        return "\n".join(lines)

    def _transactions(self) -> str:
        transactions = self._result.input.transactions
        if not transactions:
            return "NONE\n"

        lines = []
        for transaction in transactions:
            line = (
                f"{format_date(transaction.date)} {transaction.kind.value} "
                f"{format_amount(transaction.amount)} of {transaction.asset}"
            )
            if transaction.kind != TransactionKind.GIFT:
                line += (
                    f" at £{format_amount(transaction.price)} with "
                    f"£{format_amount(transaction.expenses)} expenses"
                )
            lines.append(line)
        return "\n".join(lines) + "\n"

    def _asset_events(self) -> str:
        asset_events = self._result.input.asset_events
        if not asset_events:
            return "NONE\n"

        lines = []
        for event in asset_events:
            prefix = f"{format_date(event.date)} {event.asset} "
            kind = event.kind
            if isinstance(kind, CapitalReturn):
                description = (
                    f"CAPITAL RETURN on {format_amount(kind.amount)} for {format_currency(kind.value)}"
                )
            elif isinstance(kind, Dividend):
                description = (
                    f"DIVIDEND on {format_amount(kind.amount)} for {format_currency(kind.value)}"
                )
            elif isinstance(kind, Split):
                description = f"SPLIT by {format_amount(kind.multiplier)}"
            elif isinstance(kind, Unsplit):
                description = f"UNSPLIT by {format_amount(kind.multiplier)}"
            else:
                raise TypeError(f"Unknown asset event kind: {kind!r}")
            lines.append(prefix + description)
        return "\n".join(lines) + "\n"


__all__ = ["TextReportRenderer", "format_currency", "format_date"]
