"""Sleep and delay

The delay primitive every loop in waitkit paces itself with,
plus a sleep-before-run combinator built on it."""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable, Coroutine

from kungfu import LazyCoroResult, Ok, Result

from .._helpers import to_seconds, wrap_lazy_coro_result_writer
from .._types import NoError
from ..writer import LazyCoroResultWriter


def _check_ms(ms: float) -> None:
    if ms < 0.0:
        raise ValueError("ms must be >= 0")


def sleep(ms: float) -> LazyCoroResult[None, NoError]:
    """
    Complete with Ok(None) no earlier than `ms` milliseconds after being awaited.

    Never fails. One timer per run; the timer cannot be cancelled through
    this API (cancelling the awaiting task still works as usual).

    Example:
        await sleep(250)  # Ok(None), ~0.25s later
    """
    _check_ms(ms)

    async def run() -> Result[None, NoError]:
        await asyncio.sleep(to_seconds(ms))
        return Ok(None)

    return LazyCoroResult(run)


# Generic combinator (extract + wrap pattern)
def delayM[M, Raw](
    interp: Callable[[], Coroutine[typing.Any, typing.Any, Raw]],
    *,
    ms: float,
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]], M],
) -> M:
    """
    Generic delay combinator.

    Sleep, then run.
    """
    _check_ms(ms)

    async def run() -> Raw:
        if ms > 0.0:
            await sleep(ms)
        return await interp()

    return wrap(run)


# Sugar for LazyCoroResult
def delay[T, E](
    interp: LazyCoroResult[T, E],
    *,
    ms: float,
) -> LazyCoroResult[T, E]:
    """Sleep before running."""
    return delayM(interp, ms=ms, wrap=LazyCoroResult)


# Sugar for LazyCoroResultWriter
def delay_writer[T, E, W](
    interp: LazyCoroResultWriter[T, E, W],
    *,
    ms: float,
) -> LazyCoroResultWriter[T, E, W]:
    """Sleep before running. Preserves log."""
    return delayM(interp, ms=ms, wrap=wrap_lazy_coro_result_writer)


__all__ = ("sleep", "delay", "delay_writer", "delayM")
