"""Unit tests for race_timeout and TimeoutPolicy."""

from __future__ import annotations

import asyncio

import pytest

from retrykit.config.validation import ConfigurationError
from retrykit.kernel.errors import AttemptTimeout
from retrykit.resilience.timeouts import OperationCancelledError, TimeoutPolicy, race_timeout
from retrykit.testing import HANG, ScriptedOperation


# ---------------------------------------------------------------------------
# race_timeout
# ---------------------------------------------------------------------------


class TestRaceTimeout:
    def test_returns_value_before_timer(self) -> None:
        op = ScriptedOperation("done", latency=0.001)
        assert asyncio.run(race_timeout(op, 1.0)) == "done"

    def test_no_timeout_waits_for_result(self) -> None:
        op = ScriptedOperation("eventually", latency=0.02)
        assert asyncio.run(race_timeout(op, None)) == "eventually"

    def test_timer_wins(self) -> None:
        with pytest.raises(AttemptTimeout) as info:
            asyncio.run(race_timeout(ScriptedOperation(HANG), 0.01, attempt=4))
        assert info.value.attempt == 4
        assert info.value.timeout_seconds == 0.01
        assert info.value.code == "attempt_timeout"

    def test_operation_error_propagates_unchanged(self) -> None:
        boom = ValueError("inner error")
        with pytest.raises(ValueError) as info:
            asyncio.run(race_timeout(ScriptedOperation(boom), 1.0))
        assert info.value is boom

    def test_synchronous_error_propagates(self) -> None:
        def op() -> None:
            raise LookupError("sync")

        with pytest.raises(LookupError):
            asyncio.run(race_timeout(op, 1.0))  # type: ignore[arg-type]

    def test_self_cancelling_operation(self) -> None:
        async def op() -> None:
            raise asyncio.CancelledError()

        with pytest.raises(OperationCancelledError):
            asyncio.run(race_timeout(op, 1.0))

    def test_cancel_flag_controls_abandoned_task(self) -> None:
        cancelling = ScriptedOperation(HANG)
        abandoning = ScriptedOperation("late", latency=0.03)

        async def run() -> None:
            with pytest.raises(AttemptTimeout):
                await race_timeout(cancelling, 0.01, cancel=True)
            with pytest.raises(AttemptTimeout):
                await race_timeout(abandoning, 0.01, cancel=False)
            await asyncio.sleep(0.05)

        asyncio.run(run())
        assert cancelling.cancelled == 1
        assert abandoning.cancelled == 0


# ---------------------------------------------------------------------------
# TimeoutPolicy
# ---------------------------------------------------------------------------


class TestTimeoutPolicy:
    def test_fast_call_returns_result(self) -> None:
        async def fast() -> str:
            return "done"

        assert asyncio.run(TimeoutPolicy(timeout_seconds=5.0).execute(fast)) == "done"

    def test_slow_call_raises_attempt_timeout(self) -> None:
        async def slow() -> None:
            await asyncio.sleep(10.0)

        with pytest.raises(AttemptTimeout, match="0.01"):
            asyncio.run(TimeoutPolicy(timeout_seconds=0.01).execute(slow))

    def test_exception_in_fast_fn_propagates(self) -> None:
        async def failing() -> None:
            raise ValueError("inner error")

        with pytest.raises(ValueError, match="inner error"):
            asyncio.run(TimeoutPolicy(timeout_seconds=5.0).execute(failing))

    def test_default_timeout(self) -> None:
        assert TimeoutPolicy().timeout_seconds == 5.0

    @pytest.mark.parametrize("seconds", [0, -1, None, "5", True, float("nan"), float("inf")])
    def test_invalid_timeout_rejected(self, seconds: float) -> None:
        with pytest.raises(ConfigurationError):
            TimeoutPolicy(timeout_seconds=seconds)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Public surface smoke test
# ---------------------------------------------------------------------------


class TestPublicReExports:
    def test_all_symbols_importable(self) -> None:
        import importlib

        mod = importlib.import_module("retrykit.resilience.timeouts")
        for name in mod.__all__:
            assert hasattr(mod, name), f"{name!r} missing"
