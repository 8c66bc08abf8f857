"""Wait combinators

Race a computation against a timer.

Unlike asyncio.wait_for, the losing computation is left running by
default: the outcome is decided as soon as the timer fires, and the
computation finishes (or fails) in the background."""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Callable, Coroutine
from dataclasses import dataclass

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import TIMEOUT, TimeoutTag
from .._helpers import to_seconds, wrap_lazy_coro_result_writer
from ..writer import LazyCoroResultWriter, Log, WriterResult

logger = logging.getLogger(__name__)

# Strong references to computations that lost the race and are still running.
_background: set[asyncio.Task[typing.Any]] = set()


@dataclass(frozen=True, slots=True)
class WaitPolicy:
    """Timer length and what to do with the computation once the timer wins."""

    ms: float
    cancel_pending: bool = False

    def __post_init__(self) -> None:
        if self.ms < 0.0:
            raise ValueError("WaitPolicy.ms must be >= 0")


def _forget(task: asyncio.Task[typing.Any]) -> None:
    _background.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.debug("abandoned computation failed in background", exc_info=exc)


def _abandon(task: asyncio.Task[typing.Any], *, cancel: bool) -> None:
    if task.done():
        return
    if cancel:
        task.cancel()
    _background.add(task)
    task.add_done_callback(_forget)


def pending_count() -> int:
    """Number of abandoned computations still running in the background."""
    return len(_background)


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


def waitM[M, RawIn, RawOut](
    interp: Callable[[], Coroutine[typing.Any, typing.Any, RawIn]],
    *,
    policy: WaitPolicy,
    widen: Callable[[RawIn], RawOut],
    on_timeout: Callable[[], RawOut],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, RawOut]]], M],
) -> M:
    """
    Generic wait combinator.

    Start interp and a timer together. If interp completes first its raw
    outcome is widened and returned (an exception raised by interp
    propagates). If the timer fires first, on_timeout() is returned.
    """

    async def run() -> RawOut:
        task = asyncio.create_task(interp())
        try:
            done, _ = await asyncio.wait((task,), timeout=to_seconds(policy.ms))
        except asyncio.CancelledError:
            _abandon(task, cancel=policy.cancel_pending)
            raise

        if task in done:
            return widen(task.result())

        logger.debug("timer won after %sms (cancel_pending=%s)", policy.ms, policy.cancel_pending)
        _abandon(task, cancel=policy.cancel_pending)
        return on_timeout()

    return wrap(run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def wait[T, E](
    interp: LazyCoroResult[T, E],
    *,
    ms: float,
    cancel_pending: bool = False,
) -> LazyCoroResult[T, E | TimeoutTag]:
    """
    Race interp against a timer of `ms` milliseconds.

    - interp finishes first: its own Ok(value) or Error(e)
    - timer fires first: Error("Rejected: timeout")

    The losing interp keeps running unless cancel_pending=True.

    Example:
        result = await wait(L.up.catching_async(fetch, on_error=str), ms=500)
    """

    def widen(r: Result[T, E]) -> Result[T, E | TimeoutTag]:
        match r:
            case Ok(v):
                return Ok(v)
            case Error(e):
                return Error(e)

    def on_timeout() -> Result[T, E | TimeoutTag]:
        return Error(TIMEOUT)

    return waitM(
        interp,
        policy=WaitPolicy(ms=ms, cancel_pending=cancel_pending),
        widen=widen,
        on_timeout=on_timeout,
        wrap=LazyCoroResult,
    )


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def wait_writer[T, E](
    interp: LazyCoroResultWriter[T, E, str],
    *,
    ms: float,
    cancel_pending: bool = False,
) -> LazyCoroResultWriter[T, E | TimeoutTag, str]:
    """
    Race for LazyCoroResultWriter.

    The winner's log is kept. On timeout the log holds a single
    entry describing the timeout; whatever the abandoned run logs is lost.
    """

    def widen(wr: WriterResult[T, E, Log[str]]) -> WriterResult[T, E | TimeoutTag, Log[str]]:
        match wr.result:
            case Ok(v):
                return WriterResult(Ok(v), wr.log)
            case Error(e):
                return WriterResult(Error(e), wr.log)

    def on_timeout() -> WriterResult[T, E | TimeoutTag, Log[str]]:
        return WriterResult(Error(TIMEOUT), Log.of(f"timeout after {ms}ms"))

    return waitM(
        interp,
        policy=WaitPolicy(ms=ms, cancel_pending=cancel_pending),
        widen=widen,
        on_timeout=on_timeout,
        wrap=wrap_lazy_coro_result_writer,
    )


__all__ = ("WaitPolicy", "pending_count", "wait", "wait_writer", "waitM")
