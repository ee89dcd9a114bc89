"""Combination chain: fixed-arity builder stages from 2 up to 8 validations.

Each stage holds k independent validations sharing an error type and exposes
exactly two operations:
- combine(next): widen to arity k+1 (purely structural, nothing is evaluated)
- apply(f): collapse into one Validation by feeding all k values to f, or by
  collecting every error in insertion order

Stages are per-arity classes so each value type stays statically typed; the
evaluation itself lives once, in _Stage._collapse.

Example:
    >>> combine(success("John"), success(5), success("123 Fake St")).apply(
    ...     lambda name, age, addr: f"{name}:{age}:{addr}"
    ... )
    Success('John:5:123 Fake St')
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, Generic, TypeVar, overload

from validcase.errors import ArityError, require

from .core import Success, Validation

E = TypeVar("E")
R = TypeVar("R")
T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")
T4 = TypeVar("T4")
T5 = TypeVar("T5")
T6 = TypeVar("T6")
T7 = TypeVar("T7")
T8 = TypeVar("T8")

MIN_ARITY = 2
MAX_ARITY = 8


def _curry(f: Callable[..., R], arity: int) -> Callable[[Any], Any]:
    """Turn an arity-n function into n nested single-argument functions."""
    if arity == 1:
        return f
    return lambda value: _curry(partial(f, value), arity - 1)


class _Stage(Generic[E]):
    """Shared storage and evaluation for all builder stages."""

    __slots__ = ("_validations",)

    def __init__(self, *validations: Validation[E, Any]) -> None:
        for i, v in enumerate(validations, 1):
            require(v, f"validation{i}", "combine")
        self._validations: tuple[Validation[E, Any], ...] = validations

    def _collapse(self, f: Callable[..., R]) -> Validation[tuple[E, ...], R]:
        # Fold ap left to right so errors land in insertion order
        require(f, "f", "apply")
        acc: Validation[tuple[E, ...], Any] = Success(_curry(f, len(self._validations)))
        for v in self._validations:
            acc = v.ap(acc)
        return acc


class Builder2(_Stage[E], Generic[E, T1, T2]):
    __slots__ = ()

    def __init__(self, v1: Validation[E, T1], v2: Validation[E, T2]) -> None:
        super().__init__(v1, v2)

    def apply(self, f: Callable[[T1, T2], R]) -> Validation[tuple[E, ...], R]:
        return self._collapse(f)

    def combine(self, v3: Validation[E, T3]) -> Builder3[E, T1, T2, T3]:
        return Builder3(*self._validations, v3)


class Builder3(_Stage[E], Generic[E, T1, T2, T3]):
    __slots__ = ()

    def __init__(self, v1: Validation[E, T1], v2: Validation[E, T2], v3: Validation[E, T3]) -> None:
        super().__init__(v1, v2, v3)

    def apply(self, f: Callable[[T1, T2, T3], R]) -> Validation[tuple[E, ...], R]:
        return self._collapse(f)

    def combine(self, v4: Validation[E, T4]) -> Builder4[E, T1, T2, T3, T4]:
        return Builder4(*self._validations, v4)


class Builder4(_Stage[E], Generic[E, T1, T2, T3, T4]):
    __slots__ = ()

    def __init__(
        self, v1: Validation[E, T1], v2: Validation[E, T2], v3: Validation[E, T3], v4: Validation[E, T4]
    ) -> None:
        super().__init__(v1, v2, v3, v4)

    def apply(self, f: Callable[[T1, T2, T3, T4], R]) -> Validation[tuple[E, ...], R]:
        return self._collapse(f)

    def combine(self, v5: Validation[E, T5]) -> Builder5[E, T1, T2, T3, T4, T5]:
        return Builder5(*self._validations, v5)


class Builder5(_Stage[E], Generic[E, T1, T2, T3, T4, T5]):
    __slots__ = ()

    def __init__(
        self,
        v1: Validation[E, T1],
        v2: Validation[E, T2],
        v3: Validation[E, T3],
        v4: Validation[E, T4],
        v5: Validation[E, T5],
    ) -> None:
        super().__init__(v1, v2, v3, v4, v5)

    def apply(self, f: Callable[[T1, T2, T3, T4, T5], R]) -> Validation[tuple[E, ...], R]:
        return self._collapse(f)

    def combine(self, v6: Validation[E, T6]) -> Builder6[E, T1, T2, T3, T4, T5, T6]:
        return Builder6(*self._validations, v6)


class Builder6(_Stage[E], Generic[E, T1, T2, T3, T4, T5, T6]):
    __slots__ = ()

    def __init__(
        self,
        v1: Validation[E, T1],
        v2: Validation[E, T2],
        v3: Validation[E, T3],
        v4: Validation[E, T4],
        v5: Validation[E, T5],
        v6: Validation[E, T6],
    ) -> None:
        super().__init__(v1, v2, v3, v4, v5, v6)

    def apply(self, f: Callable[[T1, T2, T3, T4, T5, T6], R]) -> Validation[tuple[E, ...], R]:
        return self._collapse(f)

    def combine(self, v7: Validation[E, T7]) -> Builder7[E, T1, T2, T3, T4, T5, T6, T7]:
        return Builder7(*self._validations, v7)


class Builder7(_Stage[E], Generic[E, T1, T2, T3, T4, T5, T6, T7]):
    __slots__ = ()

    def __init__(
        self,
        v1: Validation[E, T1],
        v2: Validation[E, T2],
        v3: Validation[E, T3],
        v4: Validation[E, T4],
        v5: Validation[E, T5],
        v6: Validation[E, T6],
        v7: Validation[E, T7],
    ) -> None:
        super().__init__(v1, v2, v3, v4, v5, v6, v7)

    def apply(self, f: Callable[[T1, T2, T3, T4, T5, T6, T7], R]) -> Validation[tuple[E, ...], R]:
        return self._collapse(f)

    def combine(self, v8: Validation[E, T8]) -> Builder8[E, T1, T2, T3, T4, T5, T6, T7, T8]:
        return Builder8(*self._validations, v8)


class Builder8(_Stage[E], Generic[E, T1, T2, T3, T4, T5, T6, T7, T8]):
    """Last stage of the chain: apply only."""

    __slots__ = ()

    def __init__(
        self,
        v1: Validation[E, T1],
        v2: Validation[E, T2],
        v3: Validation[E, T3],
        v4: Validation[E, T4],
        v5: Validation[E, T5],
        v6: Validation[E, T6],
        v7: Validation[E, T7],
        v8: Validation[E, T8],
    ) -> None:
        super().__init__(v1, v2, v3, v4, v5, v6, v7, v8)

    def apply(self, f: Callable[[T1, T2, T3, T4, T5, T6, T7, T8], R]) -> Validation[tuple[E, ...], R]:
        return self._collapse(f)


_LADDER: dict[int, type[_Stage[Any]]] = {
    2: Builder2, 3: Builder3, 4: Builder4, 5: Builder5, 6: Builder6, 7: Builder7, 8: Builder8,
}


# ═══════════════════════════════════════════════════════════════════════════════
# Entry Point
# ═══════════════════════════════════════════════════════════════════════════════


@overload
def combine(v1: Validation[E, T1], v2: Validation[E, T2], /) -> Builder2[E, T1, T2]: ...
@overload
def combine(v1: Validation[E, T1], v2: Validation[E, T2], v3: Validation[E, T3], /) -> Builder3[E, T1, T2, T3]: ...
@overload
def combine(
    v1: Validation[E, T1], v2: Validation[E, T2], v3: Validation[E, T3], v4: Validation[E, T4], /
) -> Builder4[E, T1, T2, T3, T4]: ...
@overload
def combine(
    v1: Validation[E, T1], v2: Validation[E, T2], v3: Validation[E, T3], v4: Validation[E, T4],
    v5: Validation[E, T5], /,
) -> Builder5[E, T1, T2, T3, T4, T5]: ...
@overload
def combine(
    v1: Validation[E, T1], v2: Validation[E, T2], v3: Validation[E, T3], v4: Validation[E, T4],
    v5: Validation[E, T5], v6: Validation[E, T6], /,
) -> Builder6[E, T1, T2, T3, T4, T5, T6]: ...
@overload
def combine(
    v1: Validation[E, T1], v2: Validation[E, T2], v3: Validation[E, T3], v4: Validation[E, T4],
    v5: Validation[E, T5], v6: Validation[E, T6], v7: Validation[E, T7], /,
) -> Builder7[E, T1, T2, T3, T4, T5, T6, T7]: ...
@overload
def combine(
    v1: Validation[E, T1], v2: Validation[E, T2], v3: Validation[E, T3], v4: Validation[E, T4],
    v5: Validation[E, T5], v6: Validation[E, T6], v7: Validation[E, T7], v8: Validation[E, T8], /,
) -> Builder8[E, T1, T2, T3, T4, T5, T6, T7, T8]: ...


def combine(*validations: Validation[E, Any]) -> _Stage[E]:
    """Combine 2 to 8 independent validations into a builder stage.

    Raises:
        ArityError: If fewer than 2 or more than 8 validations are given
        NullArgumentError: If any validation is None
    """
    if (stage := _LADDER.get(len(validations))) is None:
        raise ArityError.create(
            f"expected {MIN_ARITY} to {MAX_ARITY} validations, got {len(validations)}", "combine"
        )
    return stage(*validations)
