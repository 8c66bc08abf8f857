"""
Lift helpers.

    from waitkit import lift as L

    L.up.*  - values and exception-style code -> LazyCoroResult

Examples:
    probe = L.up.catching_async(lambda: client.ping(), on_error=str)
    result = await wait(probe, ms=500)
"""

from __future__ import annotations

from . import up

from .up import catching, catching_async, fail, pure

__all__ = (
    # Namespaces
    "up",
    # Up
    "pure",
    "fail",
    "catching",
    "catching_async",
)
