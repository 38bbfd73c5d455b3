"""Exception hierarchy for cgtcalc.

All errors raised by the package inherit from CgtCalcError so callers can
catch every calculation failure with a single base class while keeping the
specific types available for finer handling.
"""

from typing import Any


class CgtCalcError(Exception):
    """Base exception for all cgtcalc errors.

    Carries an error_code and a context dict describing the failing input.
    """

    error_code: str = "CGTCALC_ERROR"

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for structured output."""
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(CgtCalcError):
    """Base exception for configuration errors."""

    error_code = "CONFIGURATION_ERROR"


class MissingTaxYearRatesError(ConfigurationError):
    """Raised when no statutory rates are configured for a tax year."""

    error_code = "MISSING_TAX_YEAR_RATES"

    def __init__(self, tax_year: object) -> None:
        super().__init__(
            f"Missing tax year rates for {tax_year}",
            context={"tax_year": str(tax_year)},
        )


class InvalidTaxRatesFileError(ConfigurationError):
    """Raised when a tax rates override file cannot be read or parsed."""

    error_code = "INVALID_TAX_RATES_FILE"

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(
            f"Invalid tax rates file {path}: {reason}",
            context={"path": str(path), "reason": reason},
        )


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(CgtCalcError):
    """Base exception for invalid input data."""

    error_code = "VALIDATION_ERROR"


class InvalidTransactionError(ValidationError):
    """Raised when a transaction violates its invariants."""

    error_code = "INVALID_TRANSACTION"


class InvalidDisposalMatchError(ValidationError):
    """Raised when a disposal match is built from inconsistent data."""

    error_code = "INVALID_DISPOSAL_MATCH"


class AssetEventError(ValidationError):
    """Raised when an asset event cannot be applied to a holding."""

    error_code = "ASSET_EVENT_ERROR"

    def __init__(self, asset: str, message: str) -> None:
        super().__init__(message, context={"asset": asset})
