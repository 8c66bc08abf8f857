"""Outcome tags.

Every helper reports its outcome as one of these exact strings.
The underlying exception (if any) is not part of the outcome."""

from __future__ import annotations

from typing import Final, Literal

type TimeoutTag = Literal["Rejected: timeout"]
type CallbackSucceedTag = Literal["Resolved: callback succeed"]
type CallbacksSucceedTag = Literal["Resolved: callbacks succeed"]
type CallbackFailedTag = Literal["Rejected: callback failed"]
type MaxRetriesTag = Literal["Rejected: max retries"]

TIMEOUT: Final = "Rejected: timeout"
CALLBACK_SUCCEED: Final = "Resolved: callback succeed"
CALLBACKS_SUCCEED: Final = "Resolved: callbacks succeed"
CALLBACK_FAILED: Final = "Rejected: callback failed"
MAX_RETRIES: Final = "Rejected: max retries"

__all__ = (
    # Literal aliases
    "TimeoutTag",
    "CallbackSucceedTag",
    "CallbacksSucceedTag",
    "CallbackFailedTag",
    "MaxRetriesTag",
    # Values
    "TIMEOUT",
    "CALLBACK_SUCCEED",
    "CALLBACKS_SUCCEED",
    "CALLBACK_FAILED",
    "MAX_RETRIES",
)
