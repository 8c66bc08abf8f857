"""LazyCoroResultWriter

Lazy coroutine producing a WriterResult: a kungfu Result plus the Log
of steps that led to it. Returned by the *_writer variants."""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine

from .log import Log
from .result import WriterResult


class LazyCoroResultWriter[T, E, W]:
    """Lazy Coroutine Result Writer.

    Nothing runs until the writer is awaited (or called).
    Each await starts a fresh run.
    """

    __slots__ = ("_value",)

    def __init__(
        self,
        value: Callable[[], Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]],
        /,
    ) -> None:
        self._value = value

    def __call__(self) -> Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]:
        """Start a run, returning its coroutine."""
        return self._value()

    def __await__(self) -> typing.Generator[typing.Any, None, WriterResult[T, E, Log[W]]]:
        return self().__await__()


__all__ = ("LazyCoroResultWriter",)
