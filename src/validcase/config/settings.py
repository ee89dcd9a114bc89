"""Environment-based configuration using pydantic-settings.

Example:
    >>> from validcase.config import get_settings
    >>> get_settings().report.level
    'WARNING'

    # Or with environment variables:
    # VALIDCASE_LOG_LEVEL=DEBUG
    # VALIDCASE_REPORT_SEPARATOR="; "
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="VALIDCASE_LOG_",
        extra="ignore",
    )

    level: LogLevel = "INFO"
    format: Literal["console", "json", "none"] = "console"
    colors: bool | None = Field(default=None, description="None auto-detects a TTY")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ReportSettings(BaseSettings):
    """How failed validations are reported and rendered."""

    model_config = SettingsConfigDict(
        env_prefix="VALIDCASE_REPORT_",
        extra="ignore",
    )

    level: LogLevel = "WARNING"
    separator: str = Field(default="\n", description="Joins rendered errors")
    bullet: str = Field(default="- ", description="Prefix for each rendered error")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ValidcaseSettings(BaseSettings):
    """Root settings, loaded from VALIDCASE_* environment variables and .env."""

    model_config = SettingsConfigDict(
        env_prefix="VALIDCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Force DEBUG logging, so successful reports are logged too")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)


@lru_cache(maxsize=1)
def get_settings() -> ValidcaseSettings:
    """Get the global settings instance (cached)."""
    return ValidcaseSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() rereads the environment."""
    get_settings.cache_clear()
