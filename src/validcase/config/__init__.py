"""Configuration for validcase."""

from .settings import (
    LoggingSettings,
    ReportSettings,
    ValidcaseSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = ["ValidcaseSettings", "LoggingSettings", "ReportSettings", "get_settings", "clear_settings_cache"]
