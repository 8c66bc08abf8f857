"""
Core type definitions for waitkit.

Aliases shared by the time, control and collection modules.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

from kungfu import LazyCoroResult

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = zero-arg sync check polled by wait_for
type Predicate = Callable[[], bool]

# Callback = zero-arg step run by do_callbacks, sync or async
type Callback[T] = Callable[[], T | Awaitable[T]]

# NoError = "never fails" (sleep, delay of an infallible computation)
type NoError = typing.Never

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# LCR = LazyCoroResult shortcut
type LCR[T, E] = LazyCoroResult[T, E]

__all__ = (
    "Predicate",
    "Callback",
    "NoError",
    "LCR",
)
