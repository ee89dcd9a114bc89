"""Caller-side reporting of validation outcomes.

Violation is a ready-made domain error payload for field validators. render_errors
turns accumulated errors into display text and report logs an outcome without
altering it.

Example:
    >>> def check_age(age: int) -> Validation[Violation, int]:
    ...     return success(age) if age > 0 else failure(violation("age", "must be positive"))
    >>> result = combine(check_name(name), check_age(age)).apply(User)
    >>> print(render_errors(report(result, operation="signup").get_error()))
    - age: must be positive
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated, Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from validcase.config import get_settings
from validcase.observability import BoundLogger, get_logger

if TYPE_CHECKING:
    from validcase.validation import Validation

V = TypeVar("V", bound="Validation[Any, Any]")


class Violation(BaseModel):
    """A single failed rule on a named field."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="forbid")

    field: Annotated[str, Field(min_length=1)]
    message: Annotated[str, Field(min_length=1)]
    code: str | None = None

    def __str__(self) -> str:
        code = f" [{self.code}]" if self.code else ""
        return f"{self.field}: {self.message}{code}"


def violation(field: str, message: str, code: str | None = None) -> Violation:
    """Create Violation concisely."""
    return Violation(field=field, message=message, code=code)


def _as_items(errors: object) -> tuple[object, ...]:
    return tuple(errors) if isinstance(errors, (tuple, list)) else (errors,)


def render_errors(errors: object, *, bullet: str | None = None, separator: str | None = None) -> str:
    """Render one error or a sequence of errors, one per line by default."""
    cfg = get_settings().report
    bullet = cfg.bullet if bullet is None else bullet
    separator = cfg.separator if separator is None else separator
    return separator.join(f"{bullet}{e}" for e in _as_items(errors))


def report(validation: V, *, log: BoundLogger | None = None, operation: str = "validation") -> V:
    """Log the outcome of a validation and return it unchanged.

    Failures log at the configured report level with every error; successes at debug.
    """
    log = (log or get_logger("validcase")).bind(operation=operation)
    if validation.is_success():
        log.debug("validation passed")
        return validation
    items = _as_items(validation.get_error())
    log.log(
        getattr(logging, get_settings().report.level, logging.WARNING),
        "validation failed",
        error_count=len(items),
        errors=[str(e) for e in items],
    )
    return validation
