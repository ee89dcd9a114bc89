"""Shared fixtures: fresh settings and logging state per test."""

from __future__ import annotations

import io
from collections.abc import Iterator

import pytest

from validcase.config import clear_settings_cache
from validcase.observability import ConsoleRenderer, reset_logging


@pytest.fixture(autouse=True)
def clean_state() -> Iterator[None]:
    """Reset cached settings and global logging before and after each test."""
    clear_settings_cache()
    reset_logging()
    yield
    clear_settings_cache()
    reset_logging()


@pytest.fixture
def log_output() -> io.StringIO:
    """Buffer receiving console log lines."""
    return io.StringIO()


@pytest.fixture
def console(log_output: io.StringIO) -> ConsoleRenderer:
    """Colorless, timestamp-free renderer writing to log_output."""
    return ConsoleRenderer(output=log_output, colors=False, show_timestamp=False)
