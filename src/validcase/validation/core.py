"""Validation: an error-accumulating applicative.

A Validation is either a Success holding a value or a Failure holding an error.
Unlike Result, independent validations combine without short-circuiting: every
failure is collected, in combination order, into a tuple of errors.

Implements:
- Functor: map, map_error
- Bifunctor: bimap
- Applicative: ap (the single place where errors accumulate), apply
- Elimination: fold, swap, to_either

Examples:
    >>> success(5).map(lambda x: x * 2)
    Success(10)
    >>> failure("bad").combine(failure("worse")).apply(lambda a, b: a + b)
    Failure(('bad', 'worse'))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, ClassVar, Generic, TypeVar, final

from validcase.errors import (
    EmptyValueError,
    Err,
    IllegalStateError,
    Ok,
    Result,
    UnexpectedResultError,
    require,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .builder import Builder2

T = TypeVar("T")  # Value type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped value type
F = TypeVar("F")  # Mapped error type


class Validation(Generic[E, T]):
    """Sum type of Success and Failure.

    Both variants are frozen, slotted and compare structurally on their payload.
    Use structural pattern matching for exhaustive case analysis:

        >>> match success(1):
        ...     case Success(v): print(v)
        ...     case Failure(e): print(e)
        1
    """

    __slots__ = ()
    _is_ok: ClassVar[bool]

    # ─── Type Checking ───────────────────────────────────────────────

    def is_success(self) -> bool:
        """Check if Validation is the Success variant."""
        return self._is_ok

    def is_failure(self) -> bool:
        """Check if Validation is the Failure variant."""
        return not self._is_ok

    def is_empty(self) -> bool:
        """A Failure holds no value."""
        return not self._is_ok

    # ─── Value Extraction ────────────────────────────────────────────

    def get(self) -> T:
        """Extract the value. Raises EmptyValueError on Failure."""
        if self._is_ok:
            return self.value  # type: ignore[attr-defined,no-any-return]
        raise EmptyValueError.create("get() on Failure", "get")

    def get_error(self) -> E:
        """Extract the error. Raises IllegalStateError on Success."""
        if not self._is_ok:
            return self.error  # type: ignore[attr-defined,no-any-return]
        raise IllegalStateError.create("get_error() on Success", "get_error")

    def get_or_else(self, default: T) -> T:
        """Extract the value or return default."""
        return self.value if self._is_ok else default  # type: ignore[attr-defined,no-any-return]

    def get_or_else_get(self, f: Callable[[E], T]) -> T:
        """Extract the value or compute one from the error."""
        require(f, "f", "get_or_else_get")
        return self.value if self._is_ok else f(self.error)  # type: ignore[attr-defined,no-any-return]

    # ─── Functor / Bifunctor ─────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Validation[E, U]:
        """Apply f to the value. Failure passes through unchanged."""
        require(f, "f", "map")
        return Success(f(self.value)) if self._is_ok else self  # type: ignore[attr-defined,return-value]

    def map_error(self, f: Callable[[E], F]) -> Validation[F, T]:
        """Apply f to the error. Success passes through unchanged."""
        require(f, "f", "map_error")
        return self if self._is_ok else Failure(f(self.error))  # type: ignore[attr-defined,return-value]

    def bimap(self, error_fn: Callable[[E], F], value_fn: Callable[[T], U]) -> Validation[F, U]:
        """Apply error_fn on Failure or value_fn on Success, never both."""
        require(error_fn, "error_fn", "bimap")
        require(value_fn, "value_fn", "bimap")
        if self._is_ok:
            return Success(value_fn(self.value))  # type: ignore[attr-defined]
        return Failure(error_fn(self.error))  # type: ignore[attr-defined]

    def swap(self) -> Validation[T, E]:
        """Exchange the channels: Success(v) -> Failure(v), Failure(e) -> Success(e)."""
        return Failure(self.value) if self._is_ok else Success(self.error)  # type: ignore[attr-defined]

    def fold(self, on_failure: Callable[[E], U], on_success: Callable[[T], U]) -> U:
        """Eliminate into a single result, invoking exactly one function."""
        require(on_failure, "on_failure", "fold")
        require(on_success, "on_success", "fold")
        return on_success(self.value) if self._is_ok else on_failure(self.error)  # type: ignore[attr-defined]

    # ─── Monad-ish Conveniences ──────────────────────────────────────

    def flat_map(self, f: Callable[[T], Validation[E, U]]) -> Validation[E, U]:
        """Chain a dependent validation (short-circuits, no accumulation).

        Raises:
            UnexpectedResultError: If f returns anything but a Validation
        """
        require(f, "f", "flat_map")
        if not self._is_ok:
            return self  # type: ignore[return-value]
        result = f(self.value)  # type: ignore[attr-defined]
        if not isinstance(result, Validation):
            raise UnexpectedResultError.create(
                f"mapper returned {type(result).__name__}, expected Validation", "flat_map"
            )
        return result

    def filter(self, predicate: Callable[[T], bool]) -> Validation[E, T] | None:
        """Keep self if Failure or predicate holds, else None."""
        require(predicate, "predicate", "filter")
        return self if not self._is_ok or predicate(self.value) else None  # type: ignore[attr-defined]

    def filter_not(self, predicate: Callable[[T], bool]) -> Validation[E, T] | None:
        """Keep self if Failure or predicate fails, else None."""
        require(predicate, "predicate", "filter_not")
        return self.filter(lambda v: not predicate(v))

    def peek(self, action: Callable[[T], object]) -> Validation[E, T]:
        """Call action with the value for side effects, return self."""
        require(action, "action", "peek")
        if self._is_ok:
            action(self.value)  # type: ignore[attr-defined]
        return self

    def for_each(self, action: Callable[[T], object]) -> None:
        """Call action with the value if Success."""
        self.peek(action)

    # ─── Applicative ─────────────────────────────────────────────────

    def ap(self, other: Validation[tuple[E, ...], Callable[[T], U]]) -> Validation[tuple[E, ...], U]:
        """Apply a validated function to this validated value, accumulating errors.

        | self       | other          | result                  |
        |------------|----------------|-------------------------|
        | Success(t) | Success(f)     | Success(f(t))           |
        | Success(t) | Failure(errs)  | Failure(errs)           |
        | Failure(e) | Success(f)     | Failure((e,))           |
        | Failure(e) | Failure(errs)  | Failure((*errs, e))     |
        """
        require(other, "other", "ap")
        if self._is_ok:
            return Success(other.value(self.value)) if other._is_ok else other  # type: ignore[attr-defined,return-value]
        if other._is_ok:
            return Failure((self.error,))  # type: ignore[attr-defined]
        return Failure((*other.error, self.error))  # type: ignore[attr-defined]

    def apply(self, f: Callable[[T], U]) -> Validation[tuple[E, ...], U]:
        """Collapse a single validation: the arity-1 end of the combination chain."""
        require(f, "f", "apply")
        return self.ap(Success(f))

    def combine(self, other: Validation[E, U]) -> Builder2[E, T, U]:
        """Start a combination chain with another independent validation."""
        from .builder import Builder2

        require(other, "other", "combine")
        return Builder2(self, other)

    # ─── Conversion ──────────────────────────────────────────────────

    def to_either(self) -> Result[T, E]:
        """Success -> Ok (right), Failure -> Err (left)."""
        return Ok(self.value) if self._is_ok else Err(self.error)  # type: ignore[attr-defined]

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_ok

    def __iter__(self) -> Iterator[T]:
        """Yields the value if Success, nothing if Failure."""
        if self._is_ok:
            yield self.value  # type: ignore[attr-defined]


@final
@dataclass(frozen=True, slots=True, repr=False)
class Success(Validation[E, T]):
    """Successful validation holding a value (never None)."""

    value: T
    _is_ok: ClassVar[bool] = True

    def __post_init__(self) -> None:
        require(self.value, "value", "success")

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@final
@dataclass(frozen=True, slots=True, repr=False)
class Failure(Validation[E, T]):
    """Failed validation holding an error (never None)."""

    error: E
    _is_ok: ClassVar[bool] = False

    def __post_init__(self) -> None:
        require(self.error, "error", "failure")

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def success(value: T) -> Validation[E, T]:
    """Construct a Success. Raises NullArgumentError if value is None."""
    return Success(value)


def failure(error: E) -> Validation[E, T]:
    """Construct a Failure. Raises NullArgumentError if error is None."""
    return Failure(error)


def from_either(result: Result[T, E]) -> Validation[E, T]:
    """Ok (right) -> Success, Err (left) -> Failure."""
    require(result, "result", "from_either")
    return Success(result.unwrap()) if result.is_ok() else Failure(result.unwrap_err())
