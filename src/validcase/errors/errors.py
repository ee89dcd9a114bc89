"""Structured errors raised on misuse of validations.

Domain errors never pass through here: those are plain data carried by Failure.
These exceptions signal programmer misuse (absent payloads, empty access, bad arity).
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar, Self

from pydantic import BaseModel


class ErrorCode(StrEnum):
    """Standard codes for validcase misuse errors."""
    NULL_ARGUMENT = "NULL_ARGUMENT"
    EMPTY_VALUE = "EMPTY_VALUE"
    ILLEGAL_STATE = "ILLEGAL_STATE"
    UNEXPECTED_RESULT = "UNEXPECTED_RESULT"
    ARITY_OUT_OF_RANGE = "ARITY_OUT_OF_RANGE"


class Fault(BaseModel):
    """Structured description of a misuse error."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    operation: str = ""

    def render(self) -> str:
        """Format as `[CODE] operation: message`."""
        where = f" {self.operation}:" if self.operation else ""
        return f"[{self.code}]{where} {self.message}"

    __str__ = render


class ValidcaseError(Exception):
    """Base exception wrapping a Fault."""

    code: ClassVar[ErrorCode]

    def __init__(self, fault: Fault) -> None:
        self.fault = fault
        super().__init__(fault.message)

    @classmethod
    def create(cls, message: str, operation: str = "") -> Self:
        """Build the exception with this class's error code."""
        return cls(Fault(code=cls.code, message=message, operation=operation))


class NullArgumentError(ValidcaseError, ValueError):
    """A required payload or function argument was None."""
    code = ErrorCode.NULL_ARGUMENT


class EmptyValueError(ValidcaseError, LookupError):
    """Value requested from a Failure."""
    code = ErrorCode.EMPTY_VALUE


class IllegalStateError(ValidcaseError, RuntimeError):
    """Error requested from a Success."""
    code = ErrorCode.ILLEGAL_STATE


class UnexpectedResultError(ValidcaseError, TypeError):
    """A mapper returned something other than a Validation."""
    code = ErrorCode.UNEXPECTED_RESULT


class ArityError(ValidcaseError, ValueError):
    """Combination requested with an unsupported number of validations."""
    code = ErrorCode.ARITY_OUT_OF_RANGE


def require(arg: object, name: str, operation: str = "") -> None:
    """Raise NullArgumentError if arg is None."""
    if arg is None:
        raise NullArgumentError.create(f"{name} is None", operation)
