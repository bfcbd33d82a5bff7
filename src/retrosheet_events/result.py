"""Result type for archive loads.

A load either produced parsed files (``Ok``) or failed to retrieve the archive
(``Err``). An archive that was retrieved but held no event files is
``Ok([])``, never ``Err``.

Usage:
    result = loader.load_archive(archive)
    if result.is_ok():
        files = result.unwrap()
    else:
        error = result.unwrap_err()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar, final

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)
_T = TypeVar("_T")


class UnwrapError(Exception):
    """Raised when unwrap() is called on an Err or unwrap_err() on an Ok."""


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    _value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:
        return self._value

    def unwrap_err(self) -> Exception:
        raise UnwrapError("Called unwrap_err on Ok value")

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self._value))


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    _error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> _T:
        raise UnwrapError(f"Called unwrap on Err value: {self._error}")

    def unwrap_or(self, default: _T) -> _T:
        return default

    def unwrap_err(self) -> E:
        return self._error

    def map(self, fn: Callable[..., object]) -> Err[E]:
        return self


Result = Ok[T] | Err[E]
