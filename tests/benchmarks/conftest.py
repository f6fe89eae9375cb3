"""Fixtures for the retrykit benchmarks.

All benchmarks share one session event loop so loop start-up does not show up
in the timings, and backoff sleeps go to a virtual clock so a benchmark that
retries measures executor bookkeeping rather than wall-clock waiting.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine, Iterator
from typing import Any

import pytest

from retrykit.resilience.retry import RetryingTimeoutExecutor, TenacityRetryingExecutor
from retrykit.testing import FakeClock

EXECUTORS: dict[str, type[RetryingTimeoutExecutor] | type[TenacityRetryingExecutor]] = {
    "native": RetryingTimeoutExecutor,
    "tenacity": TenacityRetryingExecutor,
}


@pytest.fixture(scope="session")
def bench_loop() -> Iterator[asyncio.AbstractEventLoop]:
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture(scope="session")
def run_async(bench_loop: asyncio.AbstractEventLoop) -> Callable[[Coroutine[Any, Any, Any]], Any]:
    """Drive one coroutine to completion on the shared loop."""
    return bench_loop.run_until_complete


@pytest.fixture(params=sorted(EXECUTORS))
def virtual_executor(request: pytest.FixtureRequest) -> RetryingTimeoutExecutor | TenacityRetryingExecutor:
    """Each executor flavour, sleeping on a fresh :class:`FakeClock`."""
    return EXECUTORS[request.param](clock=FakeClock())
