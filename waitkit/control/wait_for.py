"""
Polling combinators
===================

Ask a sync predicate the same question until it says yes,
sleeping a fixed interval between attempts.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Coroutine
from dataclasses import dataclass

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import (
    CALLBACK_FAILED,
    CALLBACK_SUCCEED,
    MAX_RETRIES,
    CallbackFailedTag,
    CallbackSucceedTag,
    MaxRetriesTag,
)
from .._helpers import wrap_lazy_coro_result_writer
from .._types import Predicate
from ..time import sleep
from ..writer import LazyCoroResultWriter, Log, WriterResult, describe_failure

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PollPolicy:
    """
    Configuration for wait_for.

    tries == 0 is allowed: the predicate is never called and the
    loop reports exhaustion straight away.
    """

    tries: int
    ms: float = 0.0

    def __post_init__(self) -> None:
        if self.tries < 0:
            raise ValueError("PollPolicy.tries must be >= 0")
        if self.ms < 0.0:
            raise ValueError("PollPolicy.ms must be >= 0")


# ============================================================================
# Generic combinator (hooks + wrap pattern)
# ============================================================================


def wait_forM[M, Raw](
    predicate: Predicate,
    *,
    policy: PollPolicy,
    on_success: Callable[[int], Raw],
    on_failed: Callable[[int, Exception], Raw],
    on_exhausted: Callable[[int], Raw],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]], M],
) -> M:
    """
    Generic polling combinator.

    Attempts run 1..policy.tries. Each attempt calls predicate once:
    - raises: on_failed(attempt, exc), no more attempts, no delay
    - truthy: on_success(attempt), no delay
    - falsy on a non-final attempt: sleep policy.ms, next attempt
    After the final falsy attempt: on_exhausted(policy.tries).

    Args:
        predicate: Zero-arg sync check
        policy: Attempt bound and inter-attempt delay
        on_success/on_failed/on_exhausted: Build the raw outcome (1-based attempt numbers)
        wrap: Constructor to wrap thunk into monad M
    """

    async def run() -> Raw:
        for attempt in range(1, policy.tries + 1):
            try:
                held = predicate()
            except Exception as exc:
                logger.debug("predicate raised on attempt %d/%d", attempt, policy.tries, exc_info=exc)
                return on_failed(attempt, exc)

            if held:
                logger.debug("predicate held on attempt %d/%d", attempt, policy.tries)
                return on_success(attempt)

            if attempt < policy.tries:
                await sleep(policy.ms)

        logger.debug("predicate never held in %d attempts", policy.tries)
        return on_exhausted(policy.tries)

    return wrap(run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


type WaitForError = CallbackFailedTag | MaxRetriesTag


def wait_for(
    predicate: Predicate,
    *,
    ms: float,
    tries: int,
) -> LazyCoroResult[CallbackSucceedTag, WaitForError]:
    """
    Poll predicate up to `tries` times, `ms` milliseconds apart.

    - Ok("Resolved: callback succeed") as soon as predicate returns True
    - Error("Rejected: callback failed") if predicate raises (never retried)
    - Error("Rejected: max retries") if every attempt returned False

    Example:
        await wait_for(lambda: server.ready, ms=100, tries=50)
    """

    def on_success(attempt: int) -> Result[CallbackSucceedTag, WaitForError]:
        _ = attempt
        return Ok(CALLBACK_SUCCEED)

    def on_failed(attempt: int, exc: Exception) -> Result[CallbackSucceedTag, WaitForError]:
        _ = (attempt, exc)
        return Error(CALLBACK_FAILED)

    def on_exhausted(attempts: int) -> Result[CallbackSucceedTag, WaitForError]:
        _ = attempts
        return Error(MAX_RETRIES)

    return wait_forM(
        predicate,
        policy=PollPolicy(tries=tries, ms=ms),
        on_success=on_success,
        on_failed=on_failed,
        on_exhausted=on_exhausted,
        wrap=LazyCoroResult,
    )


# ============================================================================
# Sugar for LazyCoroResultWriter
# ============================================================================


def _misses(count: int) -> Log[str]:
    return Log.numbered("attempt {}: false", range(1, count + 1))


def wait_for_writer(
    predicate: Predicate,
    *,
    ms: float,
    tries: int,
) -> LazyCoroResultWriter[CallbackSucceedTag, WaitForError, str]:
    """
    Polling for LazyCoroResultWriter.

    Same outcomes as wait_for; the log has one entry per attempt, e.g.
    ["attempt 1: false", "attempt 2: true"].
    """

    def on_success(attempt: int) -> WriterResult[CallbackSucceedTag, WaitForError, Log[str]]:
        log = _misses(attempt - 1).tell(f"attempt {attempt}: true")
        return WriterResult(Ok(CALLBACK_SUCCEED), log)

    def on_failed(attempt: int, exc: Exception) -> WriterResult[CallbackSucceedTag, WaitForError, Log[str]]:
        log = _misses(attempt - 1).tell(f"attempt {attempt}: {describe_failure(exc)}")
        return WriterResult(Error(CALLBACK_FAILED), log)

    def on_exhausted(attempts: int) -> WriterResult[CallbackSucceedTag, WaitForError, Log[str]]:
        return WriterResult(Error(MAX_RETRIES), _misses(attempts))

    return wait_forM(
        predicate,
        policy=PollPolicy(tries=tries, ms=ms),
        on_success=on_success,
        on_failed=on_failed,
        on_exhausted=on_exhausted,
        wrap=wrap_lazy_coro_result_writer,
    )


__all__ = ("PollPolicy", "WaitForError", "wait_for", "wait_for_writer", "wait_forM")
