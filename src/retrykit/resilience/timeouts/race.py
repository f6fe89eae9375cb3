"""Resilience – race an awaitable against a timer.

The operation runs as its own task and is raced with :func:`asyncio.wait`.
When the timer wins the task is cancelled (or merely abandoned when
``cancel=False``); whatever it eventually does is ignored, apart from a debug
log line if it fails.

When both sides settle in the same loop iteration the operation wins: if its
task is already done when :func:`asyncio.wait` returns, its result is used.
Callers must tolerate either outcome under simultaneous settlement.
"""
from __future__ import annotations

import asyncio
import functools
from typing import Awaitable, Callable, TypeVar

from retrykit.kernel.errors import AttemptTimeout
from retrykit.observability.logging import get_logger

T = TypeVar("T")
logger = get_logger(__name__)


class OperationCancelledError(RuntimeError):
    """The operation cancelled itself while nobody asked it to."""


def _consume_abandoned(task: asyncio.Future[object], *, attempt: int) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.debug("retry.abandoned_attempt_failed", attempt=attempt, error=repr(exc))


async def race_timeout(
    operation: Callable[[], Awaitable[T]],
    timeout_seconds: float | None,
    *,
    attempt: int = 1,
    cancel: bool = True,
) -> T:
    """Invoke *operation* once and wait at most *timeout_seconds* for it.

    Exceptions raised by the operation propagate unchanged. Expiry raises
    :class:`~retrykit.kernel.errors.AttemptTimeout`. ``None`` waits forever.
    Cancelling the caller cancels the in-flight operation too.
    """
    task: asyncio.Future[T] = asyncio.ensure_future(operation())
    try:
        done, _ = await asyncio.wait({task}, timeout=timeout_seconds)
    except asyncio.CancelledError:
        task.cancel()
        raise

    if task in done:
        if task.cancelled():
            raise OperationCancelledError(f"Attempt {attempt} was cancelled by the operation")
        return task.result()

    if cancel:
        task.cancel()
    task.add_done_callback(functools.partial(_consume_abandoned, attempt=attempt))
    raise AttemptTimeout(timeout_seconds or 0.0, attempt=attempt)


__all__ = ["OperationCancelledError", "race_timeout"]
