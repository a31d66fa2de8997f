"""
Configuration Management for Budget Tracker

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Report rendering (currency symbol, chart width) and logging are the only
things that vary between environments; the ledger itself has no knobs.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReportSettings(BaseSettings):
    """Text report rendering configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BUDGET_REPORT_",
        extra="ignore"
    )

    currency_symbol: str = Field(
        default="$",
        max_length=5,
        description="Symbol placed in front of formatted amounts"
    )
    chart_width: int = Field(
        default=40,
        ge=10,
        le=200,
        description="Number of bar characters that represent 100%"
    )
    bar_char: str = Field(
        default="█",
        description="Character used to draw chart bars"
    )
    category_width: int = Field(
        default=15,
        ge=5,
        le=60,
        description="Column width of category names in the chart"
    )

    @field_validator('bar_char')
    @classmethod
    def validate_bar_char(cls, v: str) -> str:
        """Bars are drawn by repetition, so exactly one character is allowed."""
        if len(v) != 1:
            raise ValueError(f"bar_char must be a single character, got {v!r}")
        return v


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Minimum level of audit events written to stderr"
    )
    log_json: bool = Field(
        default=True,
        description="Render log lines as JSON (False gives console output)"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def reports(self) -> ReportSettings:
        return ReportSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}.
    Useful for startup checks.
    """
    results = {}

    settings = get_settings()

    try:
        _ = settings.reports
        results["reports"] = True
    except Exception as e:
        results["reports"] = False
        results["reports_error"] = str(e)

    try:
        _ = settings.app
        results["app"] = True
    except Exception as e:
        results["app"] = False
        results["app_error"] = str(e)

    return results
