"""Tests for rendering and reporting validation outcomes."""

from __future__ import annotations

import io

import orjson
import pydantic
import pytest

from validcase import Validation, Violation, combine, failure, render_errors, report, success, violation
from validcase.config import clear_settings_cache
from validcase.observability import BoundLogger, ConsoleRenderer, reset_logging


def check_name(name: str) -> Validation[Violation, str]:
    return success(name) if name.strip() else failure(violation("name", "must not be blank"))


def check_age(age: int) -> Validation[Violation, int]:
    return success(age) if age > 0 else failure(violation("age", "must be positive", "range"))


# ═════════════════════════════════════════════════════════════════════════════
# Violation
# ═════════════════════════════════════════════════════════════════════════════


def test_violation_str() -> None:
    assert str(violation("name", "must not be blank")) == "name: must not be blank"
    assert str(violation("age", "must be positive", "range")) == "age: must be positive [range]"


def test_violation_is_frozen_and_hashable() -> None:
    v = violation("age", "must be positive")
    assert failure(v) == failure(violation("age", "must be positive"))
    assert hash(failure(v)) == hash(failure(violation("age", "must be positive")))
    with pytest.raises(pydantic.ValidationError):
        v.field = "other"  # type: ignore[misc]


def test_violation_rejects_empty_field() -> None:
    with pytest.raises(pydantic.ValidationError):
        Violation(field="", message="m")


# ═════════════════════════════════════════════════════════════════════════════
# Rendering
# ═════════════════════════════════════════════════════════════════════════════


def test_render_accumulated_errors() -> None:
    result = combine(check_name(" "), check_age(-1)).apply(lambda name, age: (name, age))
    assert render_errors(result.get_error()) == "- name: must not be blank\n- age: must be positive [range]"


def test_render_single_error_with_overrides() -> None:
    assert render_errors("oops", bullet="* ") == "* oops"
    assert render_errors(("a", "b"), bullet="", separator="; ") == "a; b"


def test_render_uses_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VALIDCASE_REPORT_BULLET", "> ")
    monkeypatch.setenv("VALIDCASE_REPORT_SEPARATOR", " | ")
    assert render_errors(["a", "b"]) == "> a | > b"


# ═════════════════════════════════════════════════════════════════════════════
# Reporting
# ═════════════════════════════════════════════════════════════════════════════


def test_report_failure_logs_every_error(console: ConsoleRenderer, log_output: io.StringIO) -> None:
    """Failures are logged at the report level and returned unchanged."""
    log = BoundLogger(_renderer=console)
    result = combine(check_name(""), check_age(0)).apply(lambda name, age: (name, age))

    assert report(result, log=log, operation="signup") is result

    line = log_output.getvalue()
    assert line.startswith("[warning] validation failed")
    assert "error_count=2" in line
    assert "operation=signup" in line
    assert "name: must not be blank" in line


def test_report_success_logs_debug(console: ConsoleRenderer, log_output: io.StringIO) -> None:
    log = BoundLogger(_renderer=console)
    v = success(1)

    assert report(v, log=log) is v
    assert log_output.getvalue().startswith("[debug] validation passed")


def test_report_level_from_settings(
    monkeypatch: pytest.MonkeyPatch, console: ConsoleRenderer, log_output: io.StringIO
) -> None:
    monkeypatch.setenv("VALIDCASE_REPORT_LEVEL", "error")
    report(failure("boom"), log=BoundLogger(_renderer=console))
    assert log_output.getvalue().startswith("[error] validation failed")


def test_report_respects_logger_level(console: ConsoleRenderer, log_output: io.StringIO) -> None:
    """Successes are silent when the logger is above debug."""
    report(success(1), log=BoundLogger(_renderer=console, _level=20))
    assert log_output.getvalue() == ""


# ═════════════════════════════════════════════════════════════════════════════
# Reporting without explicit logging setup
# ═════════════════════════════════════════════════════════════════════════════


def test_report_silent_when_format_none(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """The default renderer follows VALIDCASE_LOG_FORMAT."""
    monkeypatch.setenv("VALIDCASE_LOG_FORMAT", "none")
    report(failure("boom"))

    out, err = capsys.readouterr()
    assert out == ""
    assert err == ""


def test_report_json_from_settings(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("VALIDCASE_LOG_FORMAT", "json")
    report(failure("boom"))

    out, err = capsys.readouterr()
    record = orjson.loads(out)
    assert record["event"] == "validation failed"
    assert record["errors"] == ["boom"]
    assert record["logger"] == "validcase"
    assert err == ""


def test_debug_mode_reports_successes(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Successes log at debug, which only debug mode lets through by default."""
    monkeypatch.setenv("VALIDCASE_LOG_FORMAT", "json")
    report(success(1))
    assert capsys.readouterr().out == ""

    clear_settings_cache()
    reset_logging()
    monkeypatch.setenv("VALIDCASE_DEBUG", "true")
    report(success(1))

    record = orjson.loads(capsys.readouterr().out)
    assert record["level"] == "debug"
    assert record["event"] == "validation passed"
