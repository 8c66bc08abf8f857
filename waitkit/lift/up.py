"""
Lifting plain values and exception-style code into LazyCoroResult.

Mostly used to prepare an operation for `wait`, which expects a
computation that reports failure through Error rather than by raising.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Never

from kungfu import Error, LazyCoroResult, Ok, Result

from .._types import LCR


def pure[T](value: T) -> LCR[T, Never]:
    """
    Always-succeeding computation.

    Example:
        from waitkit import lift as L

        await L.up.pure(42)  # Ok(42)
    """

    async def run() -> Result[T, Never]:
        return Ok(value)

    return LazyCoroResult(run)


def fail[E](error: E) -> LCR[Never, E]:
    """Always-failing computation. Dual of pure()."""

    async def run() -> Result[Never, E]:
        return Error(error)

    return LazyCoroResult(run)


def catching[T, E](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], E],
) -> LCR[T, E]:
    """
    Run a sync thunk; an exception becomes Error(on_error(exc)).

    Example:
        from waitkit import lift as L

        L.up.catching(lambda: int(raw), on_error=lambda e: "not a number")
    """

    async def run() -> Result[T, E]:
        try:
            return Ok(thunk())
        except Exception as exc:
            return Error(on_error(exc))

    return LazyCoroResult(run)


def catching_async[T, E](
    thunk: Callable[[], Awaitable[T]],
    *,
    on_error: Callable[[Exception], E],
) -> LCR[T, E]:
    """
    Async version of catching().

    The thunk is only called when the computation runs, so the same
    lifted value can be awaited (and raced) more than once.

    Example:
        from waitkit import lift as L
        from waitkit import wait

        await wait(L.up.catching_async(lambda: client.ping(), on_error=str), ms=500)
    """

    async def run() -> Result[T, E]:
        try:
            return Ok(await thunk())
        except Exception as exc:
            return Error(on_error(exc))

    return LazyCoroResult(run)


__all__ = (
    "pure",
    "fail",
    "catching",
    "catching_async",
)
