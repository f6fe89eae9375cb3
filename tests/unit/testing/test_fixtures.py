"""Unit tests for pytest fixtures."""

from __future__ import annotations

import asyncio

from retrykit.resilience.retry import RetryingTimeoutExecutor, RetryPolicy
from retrykit.testing import FakeClock, ScriptedOperation


class TestFakeClockFixture:
    def test_returns_fake_clock(self, fake_clock: FakeClock) -> None:
        assert isinstance(fake_clock, FakeClock)
        assert fake_clock.monotonic() == 0.0
        assert fake_clock.sleeps == []


class TestFakeExecutorFixture:
    def test_returns_executor(self, fake_executor: RetryingTimeoutExecutor) -> None:
        assert isinstance(fake_executor, RetryingTimeoutExecutor)

    def test_sleeps_go_to_fake_clock(self, fake_executor: RetryingTimeoutExecutor, fake_clock: FakeClock) -> None:
        op = ScriptedOperation(OSError(), "ok")
        policy = RetryPolicy(max_attempts=2, initial_delay=30.0)

        result = asyncio.run(fake_executor.execute(op, policy))

        assert result.value == "ok"
        assert fake_clock.sleeps == [30.0]
