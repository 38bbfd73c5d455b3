import json
from decimal import Decimal
from pathlib import Path

import pytest

from cgtcalc.config import Settings
from cgtcalc.domain.tax_year import DEFAULT_TAX_YEAR_RATES, TaxYear, TaxYearRates
from cgtcalc.exceptions import InvalidTaxRatesFileError
from cgtcalc.tax_rates import get_tax_year_rates, load_tax_year_rates, parse_tax_year_rates


@pytest.fixture
def rates_file(tmp_path: Path) -> Path:
    path = tmp_path / "rates.json"
    path.write_text(
        json.dumps(
            {
                "2026/2027": {"exemption": "3000", "basic_rate": "18", "higher_rate": "24"},
                "2019/2020": {"exemption": 11000, "basic_rate": 10, "higher_rate": 20},
            }
        )
    )
    return path


class TestParseTaxYearRates:
    def test_parses_strings_and_numbers(self) -> None:
        rates = parse_tax_year_rates(
            '{"2030/2031": {"exemption": "2500.50", "basic_rate": 18.5, "higher_rate": "25"}}'
        )

        assert rates == {
            TaxYear(2030): TaxYearRates(Decimal("2500.50"), Decimal("18.5"), Decimal("25"))
        }

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_tax_year_rates(
                '{"2030/2031": {"exemption": "1", "basic_rate": "1", "higher_rate": "1", "x": 1}}'
            )


class TestLoadTaxYearRates:
    def test_loads_file(self, rates_file: Path) -> None:
        rates = load_tax_year_rates(rates_file)

        assert rates[TaxYear(2026)].higher_rate == Decimal("24")
        assert rates[TaxYear(2019)].exemption == Decimal("11000")

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidTaxRatesFileError) as exc_info:
            load_tax_year_rates(tmp_path / "missing.json")

        assert exc_info.value.error_code == "INVALID_TAX_RATES_FILE"

    def test_rate_out_of_range(self, tmp_path: Path) -> None:
        path = tmp_path / "rates.json"
        path.write_text(
            '{"2030/2031": {"exemption": "1", "basic_rate": "101", "higher_rate": "1"}}'
        )

        with pytest.raises(InvalidTaxRatesFileError, match="validation error"):
            load_tax_year_rates(path)

    def test_bad_tax_year_key(self, tmp_path: Path) -> None:
        path = tmp_path / "rates.json"
        path.write_text(
            '{"2030-2031": {"exemption": "1", "basic_rate": "1", "higher_rate": "1"}}'
        )

        with pytest.raises(InvalidTaxRatesFileError, match="Invalid tax year"):
            load_tax_year_rates(path)


class TestGetTaxYearRates:
    def test_defaults_without_file(self) -> None:
        assert get_tax_year_rates(Settings(tax_rates_file=None)) == DEFAULT_TAX_YEAR_RATES

    def test_file_overrides_and_extends_defaults(self, rates_file: Path) -> None:
        rates = get_tax_year_rates(Settings(tax_rates_file=rates_file))

        assert rates[TaxYear(2019)].exemption == Decimal("11000")
        assert TaxYear(2026) in rates
        assert rates[TaxYear(2018)] == DEFAULT_TAX_YEAR_RATES[TaxYear(2018)]
        assert DEFAULT_TAX_YEAR_RATES[TaxYear(2019)].exemption == Decimal("12000")
