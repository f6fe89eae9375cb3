"""Resilience – RetryingTimeoutExecutor.

Runs an async operation up to ``policy.max_attempts`` times. Every attempt is
raced against ``policy.per_attempt_timeout``; failed attempts are recorded and
followed by an exponential backoff suspension, except after the last one.
Attempts never overlap: attempt *n + 1* starts only once attempt *n* has
succeeded, failed or been abandoned on timeout.

A timed-out attempt is cancelled when ``policy.cancel_on_timeout`` is set
(the default). Operations that swallow cancellation, or policies that turn it
off, leave the attempt running in the background; the executor only stops
waiting for it and ignores how it ends.
"""
from __future__ import annotations

import asyncio
import functools
import uuid
from typing import Any, Awaitable, Callable, Iterable, TypeVar

from retrykit.config.validation import ConfigurationError
from retrykit.kernel.errors import AttemptError, AttemptTimeout, OperationFailure
from retrykit.kernel.time import Clock, SystemClock
from retrykit.observability.logging import get_logger
from retrykit.resilience.retry.outcome import AttemptOutcome, ExecutionResult
from retrykit.resilience.retry.policy import RetryPolicy
from retrykit.resilience.timeouts.race import race_timeout

T = TypeVar("T")
Operation = Callable[[], Awaitable[T]]


def ensure_policy(policy: Any) -> RetryPolicy:
    if policy is None:
        return RetryPolicy()
    if not isinstance(policy, RetryPolicy):
        raise ConfigurationError(
            f"Expected a RetryPolicy, got {type(policy).__name__}",
            detail={"field": "policy"},
        )
    return policy


def ensure_operation(operation: Any) -> None:
    if not callable(operation):
        raise ConfigurationError(
            f"Operation must be callable, got {type(operation).__name__}",
            detail={"field": "operation"},
        )


class RetryingTimeoutExecutor:
    """Drive an operation through timed attempts with exponential backoff.

    The executor keeps no per-call state, so one instance can serve any number
    of concurrent :meth:`execute` calls.

    Parameters
    ----------
    clock:
        Source of monotonic time and of the backoff suspension. Defaults to
        :class:`~retrykit.kernel.time.SystemClock`.
    logger:
        structlog-style logger; defaults to this module's logger.

    Example
    -------
    ::

        executor = RetryingTimeoutExecutor()
        policy = RetryPolicy(max_attempts=5, initial_delay=0.2, per_attempt_timeout=2.0)
        result = await executor.execute(lambda: client.get("/health"), policy)
        if result.succeeded:
            ...
    """

    def __init__(self, clock: Clock | None = None, logger: Any = None) -> None:
        self._clock: Clock = clock or SystemClock()
        self._logger = logger or get_logger(__name__)

    async def execute(
        self,
        operation: Operation[T],
        policy: RetryPolicy | None = None,
        *,
        execution_id: str | None = None,
    ) -> ExecutionResult[T]:
        """Run *operation* under *policy* and return the consolidated result.

        Only :class:`~retrykit.config.validation.ConfigurationError` is raised;
        every attempt failure ends up in the returned result.
        """
        policy = ensure_policy(policy)
        ensure_operation(operation)
        log = self._logger.bind(execution_id=execution_id or uuid.uuid4().hex)

        history: list[AttemptOutcome] = []
        delay_before = 0.0
        for attempt in range(1, policy.max_attempts + 1):
            started = self._clock.monotonic()
            error: AttemptError
            try:
                value = await race_timeout(
                    operation,
                    policy.per_attempt_timeout,
                    attempt=attempt,
                    cancel=policy.cancel_on_timeout,
                )
            except AttemptTimeout as exc:
                error = exc
            except Exception as exc:
                error = OperationFailure.from_exception(exc, attempt=attempt)
            else:
                history.append(
                    AttemptOutcome(
                        attempt=attempt,
                        succeeded=True,
                        value=value,
                        elapsed=self._clock.monotonic() - started,
                        delay_before=delay_before,
                    )
                )
                if attempt > 1:
                    log.info("retry.succeeded", attempt=attempt)
                else:
                    log.debug("retry.succeeded", attempt=attempt)
                return ExecutionResult.success(value, tuple(history))

            elapsed = self._clock.monotonic() - started
            history.append(
                AttemptOutcome(
                    attempt=attempt,
                    succeeded=False,
                    error=error,
                    elapsed=elapsed,
                    delay_before=delay_before,
                )
            )
            log.warning(
                "retry.attempt_failed",
                attempt=attempt,
                max_attempts=policy.max_attempts,
                **error.log_fields(),
                elapsed=round(elapsed, 6),
            )
            if attempt == policy.max_attempts:
                break

            delay_before = policy.delay_after(attempt)
            log.debug("retry.backoff", attempt=attempt, delay=delay_before)
            await self._clock.sleep(delay_before)

        result: ExecutionResult[T] = ExecutionResult.failure(tuple(history))
        log.error(
            "retry.exhausted",
            attempts=len(history),
            **error.log_fields(),
        )
        return result

    async def run(self, operation: Operation[T], policy: RetryPolicy | None = None) -> T:
        """Like :meth:`execute` but return the value or raise ``ExhaustedRetries``."""
        result = await self.execute(operation, policy)
        return result.unwrap()

    async def execute_all(
        self,
        operations: Iterable[Operation[Any]],
        policy: RetryPolicy | None = None,
    ) -> list[ExecutionResult[Any]]:
        """Run independent executions concurrently; results keep input order.

        Each execution still makes its attempts one after another; only
        separate operations overlap.
        """
        policy = ensure_policy(policy)
        ops = list(operations)
        for op in ops:
            ensure_operation(op)
        return list(await asyncio.gather(*(self.execute(op, policy) for op in ops)))

    def wrap(self, policy: RetryPolicy | None = None) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
        """Decorator: every call of the wrapped coroutine function goes through :meth:`run`."""
        policy = ensure_policy(policy)

        def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
            @functools.wraps(func)
            async def wrapper(*args: Any, **kwargs: Any) -> T:
                return await self.run(lambda: func(*args, **kwargs), policy)

            return wrapper

        return decorator


__all__ = ["Operation", "RetryingTimeoutExecutor"]
