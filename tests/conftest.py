"""Shared pytest fixtures for waitkit tests."""

from __future__ import annotations

import asyncio

import pytest


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """
    Record every asyncio.sleep delay (seconds) and skip the actual wait.

    The fake still yields to the event loop once, so ordering stays realistic.
    """
    recorded: list[float] = []
    real_sleep = asyncio.sleep

    async def fake_sleep(delay: float, result: object = None) -> object:
        recorded.append(delay)
        return await real_sleep(0, result)

    monkeypatch.setattr(asyncio, "sleep", fake_sleep)
    return recorded
