"""
waitkit: small async control-flow helpers.

- sleep / delay   - pause for a number of milliseconds
- wait            - race a computation against a timer
- wait_for        - poll a sync predicate with a fixed interval
- do_callbacks    - run callbacks in order with a pause after each

Every helper returns a lazy kungfu LazyCoroResult whose outcome is
Ok(value) or Error(tag), where tag is one of the literal strings in
waitkit._errors.

Architecture:
- Generic combinators (*M functions) take hooks + wrap, so any monad can reuse the loops
- Sugar functions for LazyCoroResult (no suffix)
- Sugar functions for LazyCoroResultWriter (*_writer suffix), carrying a step log
"""

# Core types
from ._types import LCR, Callback, NoError, Predicate

# Internal helpers (for custom monads)
from . import _helpers

# Outcome tags
from ._errors import (
    CALLBACK_FAILED,
    CALLBACK_SUCCEED,
    CALLBACKS_SUCCEED,
    MAX_RETRIES,
    TIMEOUT,
    CallbackFailedTag,
    CallbacksSucceedTag,
    CallbackSucceedTag,
    MaxRetriesTag,
    TimeoutTag,
)

# Lift helpers
from . import lift

# Writer
from . import writer
from .writer import LazyCoroResultWriter, Log, WriterResult

# Time
from .time import (
    WaitPolicy,
    pending_count,
    # LazyCoroResult
    delay,
    sleep,
    wait,
    # LazyCoroResultWriter
    delay_writer,
    wait_writer,
    # Generic
    delayM,
    waitM,
)

# Control
from .control import (
    PollPolicy,
    WaitForError,
    wait_for,
    wait_for_writer,
    wait_forM,
)

# Collection
from .collection import (
    PacePolicy,
    do_callbacks,
    do_callbacks_writer,
    do_callbacksM,
)

__all__ = (
    # Types
    "LCR",
    "Callback",
    "NoError",
    "Predicate",
    "WaitForError",
    # Internal helpers (for custom monads)
    "_helpers",
    # Tags
    "CALLBACK_FAILED",
    "CALLBACK_SUCCEED",
    "CALLBACKS_SUCCEED",
    "MAX_RETRIES",
    "TIMEOUT",
    "CallbackFailedTag",
    "CallbacksSucceedTag",
    "CallbackSucceedTag",
    "MaxRetriesTag",
    "TimeoutTag",
    # Lift
    "lift",
    # Writer
    "writer",
    "LazyCoroResultWriter",
    "Log",
    "WriterResult",
    # Policies
    "PacePolicy",
    "PollPolicy",
    "WaitPolicy",
    # Time
    "sleep",
    "delay",
    "delay_writer",
    "delayM",
    "wait",
    "wait_writer",
    "waitM",
    "pending_count",
    # Control
    "wait_for",
    "wait_for_writer",
    "wait_forM",
    # Collection
    "do_callbacks",
    "do_callbacks_writer",
    "do_callbacksM",
)
