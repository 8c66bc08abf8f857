"""
Writer
======

LazyCoroResultWriter - lazy async computation returning:
- Result[T, E] (outcome)
- Log[W] (trace of steps taken)

Built on top of kungfu's Result.
"""

from .log import Log, describe_failure
from .result import WriterResult
from .monad import LazyCoroResultWriter

__all__ = (
    "Log",
    "WriterResult",
    "LazyCoroResultWriter",
    "describe_failure",
)
