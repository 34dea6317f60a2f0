"""Deferred computation: a description of async work that only happens on run()."""
from __future__ import annotations

from typing import Awaitable, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Task(Generic[T]):
    """Wraps a zero-argument coroutine function.

    Building a Task has no side effect. Each call to run() invokes the wrapped
    function again, so re-running re-executes the work; results are not memoized.
    """

    def __init__(self, thunk: Callable[[], Awaitable[T]]) -> None:
        self._thunk = thunk

    async def run(self) -> T:
        return await self._thunk()

    def map(self, fn: Callable[[T], U]) -> "Task[U]":
        async def _mapped() -> U:
            return fn(await self._thunk())

        return Task(_mapped)

    def chain(self, fn: Callable[[T], "Task[U]"]) -> "Task[U]":
        async def _chained() -> U:
            return await fn(await self._thunk()).run()

        return Task(_chained)

    @staticmethod
    def of(value: T) -> "Task[T]":
        async def _value() -> T:
            return value

        return Task(_value)

    @staticmethod
    def reject(exc: BaseException) -> "Task[T]":
        """Task whose run() always raises exc."""

        async def _raise() -> T:
            raise exc

        return Task(_raise)
