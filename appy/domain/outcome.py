"""Two-armed outcome of a request: Ok carries the response, Err carries a RequestError."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
R = TypeVar("R")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))

    def fold(self, on_err: Callable[[object], R], on_ok: Callable[[T], R]) -> R:
        return on_ok(self.value)


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[object], object]) -> "Err[E]":
        return self

    def fold(self, on_err: Callable[[E], R], on_ok: Callable[[object], R]) -> R:
        return on_err(self.error)


Outcome = Union[Ok[T], Err[E]]
