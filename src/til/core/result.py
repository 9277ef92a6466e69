"""
Result types for til.

Core operations report failure by value instead of raising, so the CLI can
decide how to present each error kind:

    match find_root_dir(configured).and_then(resolve_note_path):
        case Ok(path):
            ...
        case Err(err):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful outcome carrying ``value``."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Feed the value into the next fallible step."""
        return fn(self.value)


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed outcome carrying ``error``."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Raise the contained error."""
        raise self.error

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Err[E]:
        return self


Result = Ok[T] | Err[E]


__all__ = ["Ok", "Err", "Result"]
