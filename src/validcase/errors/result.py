"""Result/Either: the two-branch disjoint union validations convert to and from.

Ok is the right (success) branch, Err the left (error) branch. Only the surface
needed for interop lives here; all combinators belong to Validation.

    >>> success(1).to_either()
    Ok(1)
    >>> from_either(Err("bad"))
    Failure('bad')
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


class Result(Generic[T, E]):
    """Discriminated union of Ok (right) and Err (left)."""

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        self._value = value
        self._is_ok = is_ok

    def is_ok(self) -> bool:
        """True for the right branch."""
        return self._is_ok

    def is_err(self) -> bool:
        """True for the left branch."""
        return not self._is_ok

    def unwrap(self) -> T:
        """Right payload. Raises RuntimeError on Err."""
        if self._is_ok:
            return self._value  # type: ignore[return-value]
        raise RuntimeError(f"unwrap() on {self!r}")

    def unwrap_err(self) -> E:
        """Left payload. Raises RuntimeError on Ok."""
        if not self._is_ok:
            return self._value  # type: ignore[return-value]
        raise RuntimeError(f"unwrap_err() on {self!r}")

    __bool__ = lambda self: self._is_ok  # noqa: E731
    __hash__ = lambda self: hash((self._is_ok, self._value))  # noqa: E731

    def __repr__(self) -> str:
        return f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_ok == other._is_ok and self._value == other._value


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Right branch."""
    return Result(value, True)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Left branch."""
    return Result(error, False)
