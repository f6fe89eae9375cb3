"""Unit tests for testing fakes."""

from __future__ import annotations

import asyncio

import pytest

from retrykit.testing.fakes import HANG, FakeClock, ScriptedOperation


# ---------------------------------------------------------------------------
# FakeClock
# ---------------------------------------------------------------------------


class TestFakeClock:
    def test_starts_at_given_time(self) -> None:
        assert FakeClock(start=10.0).monotonic() == 10.0

    def test_sleep_records_and_advances(self) -> None:
        clock = FakeClock()

        async def run() -> None:
            await clock.sleep(0.5)
            await clock.sleep(1.5)

        asyncio.run(run())
        assert clock.sleeps == [0.5, 1.5]
        assert clock.monotonic() == 2.0

    def test_advance_does_not_record(self) -> None:
        clock = FakeClock()
        clock.advance(3.0)
        assert clock.monotonic() == 3.0
        assert clock.sleeps == []


# ---------------------------------------------------------------------------
# ScriptedOperation
# ---------------------------------------------------------------------------


class TestScriptedOperation:
    def test_plays_steps_in_order(self) -> None:
        op = ScriptedOperation(1, 2, 3)

        async def run() -> list[int]:
            return [await op() for _ in range(3)]

        assert asyncio.run(run()) == [1, 2, 3]
        assert op.calls == 3

    def test_raises_exception_steps(self) -> None:
        op = ScriptedOperation(KeyError("k"), "ok")
        with pytest.raises(KeyError):
            asyncio.run(op())
        assert asyncio.run(op()) == "ok"

    def test_last_step_repeats(self) -> None:
        op = ScriptedOperation("only")
        assert [asyncio.run(op()) for _ in range(3)] == ["only"] * 3

    def test_hang_until_cancelled(self) -> None:
        op = ScriptedOperation(HANG)

        async def run() -> None:
            with pytest.raises(asyncio.TimeoutError):
                await asyncio.wait_for(op(), 0.01)

        asyncio.run(run())
        assert op.cancelled == 1

    def test_requires_a_step(self) -> None:
        with pytest.raises(ValueError):
            ScriptedOperation()
