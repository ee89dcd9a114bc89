"""Arbitrary-arity accumulation over sequences of validations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

from validcase.errors import require

from .core import Success, Validation

if TYPE_CHECKING:
    from collections.abc import Iterable

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


def _append(values: tuple[T, ...]) -> Callable[[T], tuple[T, ...]]:
    return lambda value: (*values, value)


def sequence(validations: Iterable[Validation[E, T]]) -> Validation[tuple[E, ...], tuple[T, ...]]:
    """[Validation[E,T]] -> Validation[(E, ...), (T, ...)]. Accumulates ALL errors, in order.

    Example:
        >>> sequence([success(1), failure("e1"), success(3), failure("e2")])
        Failure(('e1', 'e2'))
    """
    require(validations, "validations", "sequence")
    acc: Validation[tuple[E, ...], tuple[T, ...]] = Success(())
    for v in validations:
        acc = v.ap(acc.map(_append))
    return acc


def traverse(items: Iterable[T], f: Callable[[T], Validation[E, U]]) -> Validation[tuple[E, ...], tuple[U, ...]]:
    """Validate every item with f and sequence the results."""
    require(f, "f", "traverse")
    return sequence(f(item) for item in items)
