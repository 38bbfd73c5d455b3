"""Centralized configuration management using pydantic-settings.

Configuration is loaded from environment variables with sensible defaults.
All settings can be overridden via environment variables or a .env file.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Override via environment variables (prefixed with CGTCALC_) or .env file.

    Examples:
        CGTCALC_LOG_LEVEL=DEBUG
        CGTCALC_LOG_FORMAT=json
        CGTCALC_TAX_RATES_FILE=/etc/cgtcalc/rates.json
    """

    model_config = SettingsConfigDict(
        env_prefix="CGTCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "cgtcalc"
    environment: Environment = Environment.DEVELOPMENT

    # Logging
    log_level: LogLevel = LogLevel.INFO
    log_format: Literal["json", "console"] | None = Field(
        default=None,
        description="Log output format; defaults to 'json' in production, 'console' otherwise",
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")

    # Tax rates
    tax_rates_file: Path | None = Field(
        default=None,
        description="Optional JSON file overriding or extending the statutory tax year rates",
    )

    @model_validator(mode="after")
    def set_log_format_from_environment(self) -> "Settings":
        """Default to JSON logging in production when no format is given."""
        if self.log_format is None:
            self.log_format = "json" if self.is_production else "console"
        return self

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        return self.environment == Environment.TESTING


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
