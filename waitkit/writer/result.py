"""
WriterResult - Result together with its trace
=============================================
"""

from __future__ import annotations

from dataclasses import dataclass

from kungfu import Result


@dataclass(frozen=True, slots=True)
class WriterResult[T, E, W]:
    """
    Outcome of one run of a LazyCoroResultWriter.

    Matchable as WriterResult(result, log), which is how do_callbacks
    recognises a nested *_writer run that failed.
    """

    result: Result[T, E]
    log: W


__all__ = ("WriterResult",)
