from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

import pytest

from waitkit import (
    CALLBACK_FAILED,
    CALLBACKS_SUCCEED,
    PacePolicy,
    do_callbacks,
    do_callbacks_writer,
    lift as L,
    pending_count,
    wait,
    wait_for,
)

from tests.helpers import expect_error, expect_ok


def _sync(calls: list[str], name: str) -> Callable[[], bool]:
    def step() -> bool:
        calls.append(name)
        return True

    return step


def _async(calls: list[str], name: str) -> Callable[[], asyncio.Future[None]]:
    async def step() -> None:
        calls.append(name)

    return lambda: asyncio.ensure_future(step())


def _raising(calls: list[str], name: str) -> Callable[[], None]:
    def step() -> None:
        calls.append(name)
        raise RuntimeError(name)

    return step


def _rejecting(calls: list[str], name: str) -> Callable[[], object]:
    async def step() -> None:
        calls.append(name)
        raise RuntimeError(name)

    return step


@pytest.mark.asyncio
async def test_sync_callbacks_run_in_order_with_a_delay_after_each(sleeps: list[float]) -> None:
    calls: list[str] = []

    result = await do_callbacks([_sync(calls, "a"), _sync(calls, "b"), _sync(calls, "c")], ms=300)

    assert expect_ok(result) == CALLBACKS_SUCCEED
    assert calls == ["a", "b", "c"]
    assert sleeps == [0.3, 0.3, 0.3]


@pytest.mark.asyncio
async def test_mixed_sync_and_async_callbacks_are_awaited_uniformly(sleeps: list[float]) -> None:
    calls: list[str] = []

    async def coro_step() -> None:
        calls.append("coro")

    result = await do_callbacks(
        [_async(calls, "future"), _sync(calls, "sync"), coro_step],
        ms=10,
    )

    assert expect_ok(result) == CALLBACKS_SUCCEED
    assert calls == ["future", "sync", "coro"]
    assert len(sleeps) == 3


@pytest.mark.asyncio
async def test_async_callback_completes_before_the_next_starts() -> None:
    events: list[str] = []

    async def slow() -> None:
        events.append("slow:start")
        await asyncio.sleep(0.02)
        events.append("slow:end")

    def fast() -> None:
        events.append("fast")

    result = await do_callbacks([slow, fast], ms=0)

    assert expect_ok(result) == CALLBACKS_SUCCEED
    assert events == ["slow:start", "slow:end", "fast"]


@pytest.mark.asyncio
@pytest.mark.parametrize("make_failure", [_raising, _rejecting])
@pytest.mark.parametrize("j", [0, 1, 2])
async def test_failure_at_index_j_stops_the_run(
    sleeps: list[float],
    make_failure: Callable[[list[str], str], Callable[[], object]],
    j: int,
) -> None:
    calls: list[str] = []
    callbacks = [_sync(calls, f"ok{i}") for i in range(4)]
    callbacks[j] = make_failure(calls, f"bad{j}")

    result = await do_callbacks(callbacks, ms=10)

    assert expect_error(result) == CALLBACK_FAILED
    assert len(calls) == j + 1
    assert calls[-1] == f"bad{j}"
    assert len(sleeps) == j


@pytest.mark.asyncio
@pytest.mark.parametrize("j", [0, 1, 2])
async def test_nested_wait_for_exhaustion_fails_the_run(sleeps: list[float], j: int) -> None:
    calls: list[str] = []
    polls: list[int] = []

    def never() -> bool:
        polls.append(1)
        return False

    def nested() -> object:
        calls.append(f"poll{j}")
        return wait_for(never, ms=5, tries=3)

    callbacks = [_sync(calls, f"ok{i}") for i in range(4)]
    callbacks[j] = nested

    result = await do_callbacks(callbacks, ms=10)

    assert expect_error(result) == CALLBACK_FAILED
    assert calls == [*(f"ok{i}" for i in range(j)), f"poll{j}"]
    assert len(polls) == 3
    assert sleeps == [0.01] * j + [0.005, 0.005]


@pytest.mark.asyncio
@pytest.mark.parametrize("j", [0, 1, 2])
async def test_error_value_fails_the_run(sleeps: list[float], j: int) -> None:
    calls: list[str] = []

    def failing() -> object:
        calls.append(f"fail{j}")
        return L.up.fail("x")

    callbacks = [_sync(calls, f"ok{i}") for i in range(4)]
    callbacks[j] = failing

    result = await do_callbacks(callbacks, ms=10)

    assert expect_error(result) == CALLBACK_FAILED
    assert len(calls) == j + 1
    assert sleeps == [0.01] * j


@pytest.mark.asyncio
async def test_nested_wait_timeout_fails_the_run() -> None:
    gate = asyncio.Event()
    ran: list[str] = []

    async def stuck() -> int:
        await gate.wait()
        return 1

    result = await do_callbacks(
        [lambda: wait(L.up.catching_async(stuck, on_error=str), ms=10), _sync(ran, "after")],
        ms=0,
    )

    assert expect_error(result) == CALLBACK_FAILED
    assert ran == []

    gate.set()
    expect_ok(await wait_for(lambda: pending_count() == 0, ms=5, tries=200))


@pytest.mark.asyncio
async def test_ok_value_from_nested_helper_counts_as_success(sleeps: list[float]) -> None:
    result = await do_callbacks([lambda: wait_for(lambda: True, ms=5, tries=1), lambda: L.up.pure(0)], ms=10)

    assert expect_ok(result) == CALLBACKS_SUCCEED
    assert sleeps == [0.01, 0.01]


@pytest.mark.asyncio
async def test_two_callbacks_scenario(sleeps: list[float]) -> None:
    result = await do_callbacks([lambda: True, lambda: True], ms=10)

    assert expect_ok(result) == CALLBACKS_SUCCEED
    assert sleeps == [0.01, 0.01]


@pytest.mark.asyncio
async def test_second_callback_raising_scenario(sleeps: list[float]) -> None:
    def boom() -> bool:
        raise ValueError("boom")

    result = await do_callbacks([lambda: True, boom], ms=10)

    assert expect_error(result) == CALLBACK_FAILED
    assert sleeps == [0.01]


@pytest.mark.asyncio
async def test_empty_sequence_succeeds_immediately(sleeps: list[float]) -> None:
    result = await do_callbacks([], ms=500)

    assert expect_ok(result) == CALLBACKS_SUCCEED
    assert sleeps == []


@pytest.mark.asyncio
async def test_return_values_are_ignored(sleeps: list[float]) -> None:
    result = await do_callbacks([lambda: False, lambda: None, lambda: 0], ms=0)

    assert expect_ok(result) == CALLBACKS_SUCCEED


@pytest.mark.asyncio
async def test_sequence_is_snapshotted_when_built(sleeps: list[float]) -> None:
    calls: list[str] = []
    callbacks = [_sync(calls, "a")]

    pending = do_callbacks(callbacks, ms=0)
    callbacks.append(_raising(calls, "late"))

    assert expect_ok(await pending) == CALLBACKS_SUCCEED
    assert calls == ["a"]


@pytest.mark.asyncio
async def test_real_delays_add_up() -> None:
    loop = asyncio.get_running_loop()
    started = loop.time()

    await do_callbacks([lambda: True, lambda: True], ms=30)

    assert loop.time() - started >= 0.057


@pytest.mark.asyncio
async def test_writer_logs_each_step(sleeps: list[float]) -> None:
    calls: list[str] = []

    wr = await do_callbacks_writer(
        [_sync(calls, "a"), _sync(calls, "b"), _raising(calls, "c"), _sync(calls, "d")],
        ms=10,
    )

    assert expect_error(wr.result) == CALLBACK_FAILED
    assert list(wr.log[:2]) == ["callback 0: ok", "callback 1: ok"]
    assert wr.log[2] == "callback 2: raised RuntimeError('c')"
    assert len(wr.log) == 3


@pytest.mark.asyncio
async def test_writer_logs_error_value(sleeps: list[float]) -> None:
    wr = await do_callbacks_writer([lambda: None, lambda: wait_for(lambda: False, ms=1, tries=1)], ms=0)

    assert expect_error(wr.result) == CALLBACK_FAILED
    assert list(wr.log) == ["callback 0: ok", "callback 1: returned Error('Rejected: max retries')"]


@pytest.mark.asyncio
async def test_writer_success_log(sleeps: list[float]) -> None:
    wr = await do_callbacks_writer([lambda: 1, lambda: 2], ms=0)

    assert expect_ok(wr.result) == CALLBACKS_SUCCEED
    assert list(wr.log) == ["callback 0: ok", "callback 1: ok"]


@pytest.mark.asyncio
async def test_callback_failure_is_logged(
    sleeps: list[float],
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.DEBUG, logger="waitkit.collection.do_callbacks")

    await do_callbacks([_raising([], "x")], ms=0)

    assert any(
        r.name == "waitkit.collection.do_callbacks" and r.exc_info is not None
        for r in caplog.records
    )


def test_pace_policy_rejects_negative_delay() -> None:
    with pytest.raises(ValueError):
        PacePolicy(ms=-1)
