"""Structured logging for validation reporting.

Context-aware structured logging with human-readable console output for
development and JSON lines for production.

Only the reporting helpers log; Validation itself is effect-free.

Quick Start:
    >>> from validcase.observability import configure_logging, get_logger
    >>> configure_logging(format="console")  # or "json" for production
    >>> log = get_logger("signup")
    >>> log.bind(form="register").warning("validation failed", error_count=2)
"""

from __future__ import annotations

import logging
import sys
import time
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Protocol, TextIO, runtime_checkable

JsonDict = dict[str, Any]


# ─────────────────────────────────────────────────────────────────────────────
# Logger
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class BoundLogger:
    """Structured logger with bound context. bind() returns a new logger with merged context.

    Example:
        >>> log = BoundLogger(context={"form": "signup"})
        >>> log.info("validated", fields=3)
        # => 10:30:45.123 [info] validated fields=3 form=signup
    """

    context: JsonDict = field(default_factory=dict)
    _renderer: LogRenderer | None = None
    _level: int = logging.DEBUG

    def bind(self, **kw: Any) -> BoundLogger:
        """Create new logger with additional bound context."""
        return BoundLogger(context={**self.context, **kw}, _renderer=self._renderer, _level=self._level)

    def unbind(self, *keys: str) -> BoundLogger:
        """Create new logger without specified keys."""
        return BoundLogger(context={k: v for k, v in self.context.items() if k not in keys},
                           _renderer=self._renderer, _level=self._level)

    def log(self, level: int, event: str, **kw: Any) -> None:
        if level < self._level:
            return
        (self._renderer or _get_renderer()).render(
            LogEntry(time.time(), _level_name(level), event, {**self.context, **kw})
        )

    def debug(self, event: str, **kw: Any) -> None: self.log(logging.DEBUG, event, **kw)
    def info(self, event: str, **kw: Any) -> None: self.log(logging.INFO, event, **kw)
    def warning(self, event: str, **kw: Any) -> None: self.log(logging.WARNING, event, **kw)
    def error(self, event: str, **kw: Any) -> None: self.log(logging.ERROR, event, **kw)


@dataclass(slots=True)
class LogEntry:
    """Log entry with all context."""

    timestamp: float
    level: str
    event: str
    context: JsonDict

    @property
    def ts_iso(self) -> str:
        return datetime.fromtimestamp(self.timestamp, tz=UTC).isoformat()

    @property
    def ts_human(self) -> str:
        """HH:MM:SS.mmm"""
        return datetime.fromtimestamp(self.timestamp, tz=UTC).strftime("%H:%M:%S.%f")[:-3]


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


@runtime_checkable
class LogRenderer(Protocol):
    """Protocol for log output renderers."""

    def render(self, entry: LogEntry) -> None: ...


_COLORS = {"reset": "\033[0m", "dim": "\033[2m", "bold": "\033[1m", "cyan": "\033[36m"}
_NO_COLORS = dict.fromkeys(_COLORS, "")
_LEVEL_COLORS = {"debug": "\033[34m", "info": "\033[32m", "warning": "\033[33m",
                 "error": "\033[31m", "critical": "\033[1;31m"}


@dataclass(slots=True)
class ConsoleRenderer:
    """Human-readable console output. Format: timestamp [level] event key=value ..."""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    colors: bool | None = None  # None = auto-detect
    show_timestamp: bool = True

    def __post_init__(self) -> None:
        if self.colors is None:
            self.colors = getattr(self.output, "isatty", lambda: False)()

    def render(self, entry: LogEntry) -> None:
        c = _COLORS if self.colors else _NO_COLORS
        level_color = _LEVEL_COLORS.get(entry.level, "") if self.colors else ""
        parts = [f"{c['dim']}{entry.ts_human}{c['reset']}"] if self.show_timestamp else []
        parts += [f"{level_color}[{entry.level}]{c['reset']}", f"{c['bold']}{entry.event}{c['reset']}"]
        parts += [f"{c['cyan']}{k}{c['reset']}={_format_value(v)}" for k, v in sorted(entry.context.items())]
        print(" ".join(parts), file=self.output)


def _format_value(v: Any) -> str:
    # Quote strings with whitespace so key=value pairs stay parseable
    return repr(v) if isinstance(v, str) and any(ch.isspace() for ch in v) else str(v)


@dataclass(slots=True)
class JsonRenderer:
    """JSON Lines output for log aggregation."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        import orjson
        print(orjson.dumps({"timestamp": entry.ts_iso, "level": entry.level, "event": entry.event,
                            **entry.context}, option=orjson.OPT_NON_STR_KEYS, default=str).decode(),
              file=self.output)


@dataclass(slots=True)
class NoOpRenderer:
    """Silent renderer for testing."""

    def render(self, entry: LogEntry) -> None:
        pass


# ─────────────────────────────────────────────────────────────────────────────
# Global Configuration
# ─────────────────────────────────────────────────────────────────────────────


_renderer: ContextVar[LogRenderer | None] = ContextVar("log_renderer", default=None)
_default_level: ContextVar[int | None] = ContextVar("log_level", default=None)


def configure_logging(
    format: str | None = None,  # noqa: A002 - shadows builtin but matches stdlib
    level: str | None = None,
    *,
    output: TextIO | None = None,
    colors: bool | None = None,
) -> LogRenderer:
    """Configure global structured logging. Unset arguments fall back to settings.

    Format: "console" (human), "json" (machine), "none".
    """
    from validcase.config import get_settings

    cfg = get_settings().logging
    format, level = format or cfg.format, level or _settings_level()
    colors = cfg.colors if colors is None else colors
    _default_level.set(getattr(logging, level.upper(), logging.INFO))
    match format:
        case "console": renderer: LogRenderer = ConsoleRenderer(output=output or sys.stderr, colors=colors)
        case "json": renderer = JsonRenderer(output=output or sys.stdout)
        case "none": renderer = NoOpRenderer()
        case _: raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")
    _renderer.set(renderer)
    return renderer


def get_logger(name: str | None = None, **initial_context: Any) -> BoundLogger:
    """Get a structured logger. Name is added to context as 'logger'."""
    ctx = {**initial_context, **({"logger": name} if name else {})}
    return BoundLogger(context=ctx, _level=_get_level())


def reset_logging() -> None:
    """Drop configured renderer and level (useful for testing)."""
    _renderer.set(None)
    _default_level.set(None)


def _settings_level() -> str:
    """Configured level name; debug mode forces DEBUG."""
    from validcase.config import get_settings

    settings = get_settings()
    return "DEBUG" if settings.debug else settings.logging.level


def _get_level() -> int:
    if (level := _default_level.get()) is None:
        level = getattr(logging, _settings_level(), logging.INFO)
    return level


def _get_renderer() -> LogRenderer:
    """Get configured renderer, configuring from settings on first use."""
    if (renderer := _renderer.get()) is None:
        renderer = configure_logging()
    return renderer


def _level_name(level: int) -> str:
    return logging.getLevelName(level).lower()
