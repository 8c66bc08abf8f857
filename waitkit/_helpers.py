"""Internal helpers for waitkit.

Shared by the time, control and collection modules.
Not part of the public API, but usable when wiring a custom monad into the *M functions."""

from __future__ import annotations

import inspect
import typing
from collections.abc import Awaitable, Callable, Coroutine

from .writer import LazyCoroResultWriter, Log, WriterResult


def wrap_lazy_coro_result_writer[T, E, W](
    fn: Callable[[], Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]]
) -> LazyCoroResultWriter[T, E, W]:
    """Standard wrap function for the *_writer sugar."""
    return LazyCoroResultWriter(fn)


def to_seconds(ms: float) -> float:
    """Milliseconds -> seconds for asyncio."""
    return ms / 1000.0


async def resolve[T](fn: Callable[[], T | Awaitable[T]]) -> T:
    """
    Invoke a zero-arg callable and await its result if it is awaitable.

    Sync and async callables are treated the same way: whatever they
    return is brought to a plain value before the caller continues.
    """
    value = fn()
    if inspect.isawaitable(value):
        return await value
    return typing.cast(T, value)


__all__ = (
    "wrap_lazy_coro_result_writer",
    "to_seconds",
    "resolve",
)
