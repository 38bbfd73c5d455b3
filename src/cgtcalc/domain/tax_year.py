"""UK tax years (6 April to 5 April) and their CGT rates."""

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

_TAX_YEAR_PATTERN = re.compile(r"^(\d{4})/(\d{4})$")


@dataclass(frozen=True, order=True)
class TaxYear:
    """Tax year starting on 6 April of `start_year`."""

    start_year: int

    @classmethod
    def containing(cls, day: date) -> "TaxYear":
        if (day.month, day.day) >= (4, 6):
            return cls(day.year)
        return cls(day.year - 1)

    @classmethod
    def parse(cls, text: str) -> "TaxYear":
        """Parse the "2019/2020" form produced by str()."""
        match = _TAX_YEAR_PATTERN.match(text.strip())
        if match is None or int(match.group(2)) != int(match.group(1)) + 1:
            raise ValueError(f"Invalid tax year: {text!r}")
        return cls(int(match.group(1)))

    @property
    def start_date(self) -> date:
        return date(self.start_year, 4, 6)

    @property
    def end_date(self) -> date:
        return date(self.start_year + 1, 4, 5)

    def __contains__(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def __str__(self) -> str:
        return f"{self.start_year}/{self.start_year + 1}"


@dataclass(frozen=True)
class TaxYearRates:
    """Annual exempt amount and CGT rates (percent) for one tax year."""

    exemption: Decimal
    basic_rate: Decimal
    higher_rate: Decimal


def _rates(exemption: str, basic_rate: str, higher_rate: str) -> TaxYearRates:
    return TaxYearRates(Decimal(exemption), Decimal(basic_rate), Decimal(higher_rate))


# Rates for 2024/2025 are those in force on 6 April 2024; the 18%/24% rates
# applied to disposals from 30 October 2024.
DEFAULT_TAX_YEAR_RATES: dict[TaxYear, TaxYearRates] = {
    TaxYear(2013): _rates("10900", "18", "28"),
    TaxYear(2014): _rates("11000", "18", "28"),
    TaxYear(2015): _rates("11100", "18", "28"),
    TaxYear(2016): _rates("11100", "10", "20"),
    TaxYear(2017): _rates("11300", "10", "20"),
    TaxYear(2018): _rates("11700", "10", "20"),
    TaxYear(2019): _rates("12000", "10", "20"),
    TaxYear(2020): _rates("12300", "10", "20"),
    TaxYear(2021): _rates("12300", "10", "20"),
    TaxYear(2022): _rates("12300", "10", "20"),
    TaxYear(2023): _rates("6000", "10", "20"),
    TaxYear(2024): _rates("3000", "10", "20"),
    TaxYear(2025): _rates("3000", "18", "24"),
}


__all__ = ["DEFAULT_TAX_YEAR_RATES", "TaxYear", "TaxYearRates"]
