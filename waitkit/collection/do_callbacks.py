"""Sequential runner

Run callbacks one after another with a fixed pause after each,
stopping at the first one that fails."""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Coroutine, Sequence
from dataclasses import dataclass

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import CALLBACK_FAILED, CALLBACKS_SUCCEED, CallbackFailedTag, CallbacksSucceedTag
from .._helpers import resolve, wrap_lazy_coro_result_writer
from .._types import Callback
from ..time import sleep
from ..writer import LazyCoroResultWriter, Log, WriterResult, describe_failure

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PacePolicy:
    """Pause applied after every successful callback."""

    ms: float = 0.0

    def __post_init__(self) -> None:
        if self.ms < 0.0:
            raise ValueError("PacePolicy.ms must be >= 0")


def _rejection(outcome: object) -> Error[typing.Any] | None:
    """Error carried by a callback's outcome, if it is a failed Result or writer run."""
    match outcome:
        case Error(_):
            return outcome
        case WriterResult(Error(_) as err, _):
            return err
        case _:
            return None


# Generic combinator (hooks + wrap pattern)
def do_callbacksM[M, T, Raw](
    callbacks: Sequence[Callback[T]],
    *,
    policy: PacePolicy,
    on_done: Callable[[int], Raw],
    on_failed: Callable[[int, Exception | object], Raw],
    wrap: Callable[[Callable[[], Coroutine[typing.Any, typing.Any, Raw]]], M],
) -> M:
    """
    Generic sequential runner.

    Callbacks run in order. A callback returning an awaitable is awaited
    before anything else happens. On success sleep policy.ms, then move on.

    A callback fails when it raises, when its awaitable raises, or when
    it produces a kungfu Error (including a *_writer run whose result is
    an Error). The first failure returns on_failed(index, cause) with no
    trailing sleep; cause is the exception or the Error's payload.
    When all succeeded: on_done(len(callbacks)). Other return values are discarded.
    """
    steps = tuple(callbacks)

    async def run() -> Raw:
        for index, callback in enumerate(steps):
            try:
                outcome = await resolve(callback)
            except Exception as exc:
                logger.debug("callback %d/%d failed", index + 1, len(steps), exc_info=exc)
                return on_failed(index, exc)

            match _rejection(outcome):
                case Error(cause):
                    logger.debug("callback %d/%d returned Error(%r)", index + 1, len(steps), cause)
                    return on_failed(index, cause)

            await sleep(policy.ms)
        return on_done(len(steps))

    return wrap(run)


# Sugar for LazyCoroResult
def do_callbacks[T](
    callbacks: Sequence[Callback[T]],
    *,
    ms: float,
) -> LazyCoroResult[CallbacksSucceedTag, CallbackFailedTag]:
    """
    Run callbacks in order, pausing `ms` milliseconds after each.

    - Ok("Resolved: callbacks succeed") once all ran (empty sequence included)
    - Error("Rejected: callback failed") at the first failing callback

    Other waitkit computations nest directly, and an Error from them
    counts as a failure:

    Example:
        await do_callbacks(
            [led.on, lambda: wait_for(lambda: led.lit, ms=10, tries=5), led.off],
            ms=300,
        )
    """

    def on_done(count: int) -> Result[CallbacksSucceedTag, CallbackFailedTag]:
        _ = count
        return Ok(CALLBACKS_SUCCEED)

    def on_failed(index: int, cause: Exception | object) -> Result[CallbacksSucceedTag, CallbackFailedTag]:
        _ = (index, cause)
        return Error(CALLBACK_FAILED)

    return do_callbacksM(
        callbacks,
        policy=PacePolicy(ms=ms),
        on_done=on_done,
        on_failed=on_failed,
        wrap=LazyCoroResult,
    )


# Sugar for LazyCoroResultWriter
def do_callbacks_writer[T](
    callbacks: Sequence[Callback[T]],
    *,
    ms: float,
) -> LazyCoroResultWriter[CallbacksSucceedTag, CallbackFailedTag, str]:
    """Sequential runner with one log entry per callback that ran (0-based index)."""

    def on_done(count: int) -> WriterResult[CallbacksSucceedTag, CallbackFailedTag, Log[str]]:
        return WriterResult(Ok(CALLBACKS_SUCCEED), Log.numbered("callback {}: ok", range(count)))

    def on_failed(
        index: int,
        cause: Exception | object,
    ) -> WriterResult[CallbacksSucceedTag, CallbackFailedTag, Log[str]]:
        log = Log.numbered("callback {}: ok", range(index)).tell(f"callback {index}: {describe_failure(cause)}")
        return WriterResult(Error(CALLBACK_FAILED), log)

    return do_callbacksM(
        callbacks,
        policy=PacePolicy(ms=ms),
        on_done=on_done,
        on_failed=on_failed,
        wrap=wrap_lazy_coro_result_writer,
    )


__all__ = ("PacePolicy", "do_callbacks", "do_callbacks_writer", "do_callbacksM")
