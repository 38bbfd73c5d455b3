"""Loading of tax year rate overrides from a JSON file.

The file maps tax years to rates, for example::

    {
        "2025/2026": {"exemption": "3000", "basic_rate": "18", "higher_rate": "24"}
    }

Entries replace or extend DEFAULT_TAX_YEAR_RATES.
"""

from decimal import Decimal
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from cgtcalc.config import Settings, get_settings
from cgtcalc.domain.tax_year import DEFAULT_TAX_YEAR_RATES, TaxYear, TaxYearRates
from cgtcalc.exceptions import InvalidTaxRatesFileError
from cgtcalc.logging_config import get_logger

logger = get_logger(__name__)


class TaxYearRatesSchema(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    exemption: Decimal = Field(ge=0)
    basic_rate: Decimal = Field(ge=0, le=100)
    higher_rate: Decimal = Field(ge=0, le=100)

    def to_domain(self) -> TaxYearRates:
        return TaxYearRates(
            exemption=self.exemption,
            basic_rate=self.basic_rate,
            higher_rate=self.higher_rate,
        )


_RATES_FILE_ADAPTER = TypeAdapter(dict[str, TaxYearRatesSchema])


def parse_tax_year_rates(raw: str | bytes) -> dict[TaxYear, TaxYearRates]:
    """Parse a JSON document of rates keyed by "YYYY/YYYY" tax year."""
    parsed = _RATES_FILE_ADAPTER.validate_json(raw)
    return {TaxYear.parse(key): value.to_domain() for key, value in parsed.items()}


def load_tax_year_rates(path: Path) -> dict[TaxYear, TaxYearRates]:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise InvalidTaxRatesFileError(path, exc.strerror or str(exc)) from exc

    try:
        return parse_tax_year_rates(raw)
    except PydanticValidationError as exc:
        raise InvalidTaxRatesFileError(path, f"{exc.error_count()} validation error(s)") from exc
    except ValueError as exc:
        raise InvalidTaxRatesFileError(path, str(exc)) from exc


def get_tax_year_rates(settings: Settings | None = None) -> dict[TaxYear, TaxYearRates]:
    """Statutory rates, overlaid with the configured rates file if any."""
    if settings is None:
        settings = get_settings()

    rates = dict(DEFAULT_TAX_YEAR_RATES)
    if settings.tax_rates_file is not None:
        overrides = load_tax_year_rates(settings.tax_rates_file)
        rates.update(overrides)
        logger.info(
            "tax_rates_overridden",
            path=str(settings.tax_rates_file),
            tax_years=sorted(str(tax_year) for tax_year in overrides),
        )
    return rates


__all__ = [
    "TaxYearRatesSchema",
    "get_tax_year_rates",
    "load_tax_year_rates",
    "parse_tax_year_rates",
]
