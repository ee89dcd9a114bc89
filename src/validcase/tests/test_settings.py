"""Tests for environment-based settings."""

from __future__ import annotations

import pytest

from validcase.config import ValidcaseSettings, clear_settings_cache, get_settings


def test_defaults() -> None:
    settings = get_settings()

    assert settings.debug is False
    assert settings.logging.level == "INFO"
    assert settings.logging.format == "console"
    assert settings.report.level == "WARNING"
    assert settings.report.separator == "\n"
    assert settings.report.bullet == "- "


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VALIDCASE_DEBUG", "true")
    monkeypatch.setenv("VALIDCASE_LOG_FORMAT", "json")
    monkeypatch.setenv("VALIDCASE_LOG_LEVEL", "warning")
    monkeypatch.setenv("VALIDCASE_REPORT_LEVEL", "info")

    settings = ValidcaseSettings()

    assert settings.debug is True
    assert settings.logging.format == "json"
    assert settings.logging.level == "WARNING"
    assert settings.report.level == "INFO"


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("VALIDCASE_DEBUG", "true")

    assert get_settings() is first
    clear_settings_cache()
    assert get_settings().debug is True
