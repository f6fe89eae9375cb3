"""Resilience – TenacityRetryingExecutor.

Same contract as :class:`~retrykit.resilience.retry.executor.RetryingTimeoutExecutor`,
with the attempt loop, stop condition and sleeping delegated to
``tenacity.AsyncRetrying``. Useful where an application already standardises
on tenacity hooks (``before_sleep``, ``after`` ...) and wants them applied to
retrykit policies. Hooks may observe attempts but never decide the outcome.
"""
from __future__ import annotations

import uuid
from typing import Any, TypeVar

import tenacity

from retrykit.kernel.errors import AttemptError, AttemptTimeout, OperationFailure
from retrykit.kernel.time import Clock, SystemClock
from retrykit.observability.logging import get_logger
from retrykit.resilience.retry.executor import Operation, ensure_operation, ensure_policy
from retrykit.resilience.retry.outcome import AttemptOutcome, ExecutionResult
from retrykit.resilience.retry.policy import RetryPolicy
from retrykit.resilience.timeouts.race import race_timeout

T = TypeVar("T")


class TenacityRetryingExecutor:
    """Retry executor backed by the ``tenacity`` library.

    Parameters
    ----------
    clock:
        Supplies ``monotonic()`` for attempt timing and ``sleep()`` which is
        handed to tenacity as its sleep function.
    logger:
        structlog-style logger.
    tenacity_kwargs:
        Extra keyword arguments forwarded to :class:`tenacity.AsyncRetrying`,
        e.g. ``before_sleep=...``. Arguments that would change how an
        execution ends (``stop``, ``wait``, ``retry``, ``sleep``, ``reraise``,
        ``retry_error_callback``, ``retry_error_cls``) are owned by the
        executor.

    Example
    -------
    ::

        executor = TenacityRetryingExecutor(before_sleep=my_hook)
        result = await executor.execute(fetch_user, RetryPolicy(max_attempts=4))
    """

    _RESERVED = frozenset(
        {"stop", "wait", "retry", "sleep", "reraise", "retry_error_callback", "retry_error_cls"}
    )

    def __init__(self, clock: Clock | None = None, logger: Any = None, **tenacity_kwargs: Any) -> None:
        clash = self._RESERVED.intersection(tenacity_kwargs)
        if clash:
            raise TypeError(f"Arguments managed by the executor: {sorted(clash)}")
        self._clock: Clock = clock or SystemClock()
        self._logger = logger or get_logger(__name__)
        self._extra_kwargs = tenacity_kwargs

    def _build_async_retrying(self, policy: RetryPolicy, planned: list[float], log: Any) -> tenacity.AsyncRetrying:
        def wait(retry_state: tenacity.RetryCallState) -> float:
            # Newer tenacity also asks after the final attempt; that delay is never slept.
            attempt = retry_state.attempt_number
            delay = policy.delay_after(attempt)
            planned.append(delay)
            if attempt < policy.max_attempts:
                log.debug("retry.backoff", attempt=attempt, delay=delay)
            return delay

        return tenacity.AsyncRetrying(
            stop=tenacity.stop_after_attempt(policy.max_attempts),
            wait=wait,
            retry=tenacity.retry_if_exception_type(AttemptError),
            sleep=self._clock.sleep,
            reraise=True,
            **self._extra_kwargs,
        )

    async def execute(
        self,
        operation: Operation[T],
        policy: RetryPolicy | None = None,
        *,
        execution_id: str | None = None,
    ) -> ExecutionResult[T]:
        """Run *operation* under *policy* and return the consolidated result."""
        policy = ensure_policy(policy)
        ensure_operation(operation)
        log = self._logger.bind(execution_id=execution_id or uuid.uuid4().hex, driver="tenacity")

        history: list[AttemptOutcome] = []
        planned: list[float] = []
        value: Any = None
        try:
            async for attempt in self._build_async_retrying(policy, planned, log):
                with attempt:
                    number = attempt.retry_state.attempt_number
                    delay_before = planned[number - 2] if number > 1 else 0.0
                    started = self._clock.monotonic()
                    error: AttemptError
                    try:
                        value = await race_timeout(
                            operation,
                            policy.per_attempt_timeout,
                            attempt=number,
                            cancel=policy.cancel_on_timeout,
                        )
                    except AttemptTimeout as exc:
                        error = exc
                    except Exception as exc:
                        error = OperationFailure.from_exception(exc, attempt=number)
                    else:
                        history.append(
                            AttemptOutcome(
                                attempt=number,
                                succeeded=True,
                                value=value,
                                elapsed=self._clock.monotonic() - started,
                                delay_before=delay_before,
                            )
                        )
                        continue
                    elapsed = self._clock.monotonic() - started
                    history.append(
                        AttemptOutcome(
                            attempt=number,
                            succeeded=False,
                            error=error,
                            elapsed=elapsed,
                            delay_before=delay_before,
                        )
                    )
                    log.warning(
                        "retry.attempt_failed",
                        attempt=number,
                        max_attempts=policy.max_attempts,
                        elapsed=round(elapsed, 6),
                        **error.log_fields(),
                    )
                    raise error
        except AttemptError:
            pass

        if not history[-1].succeeded:
            return self._exhausted(log, history)

        last = history[-1].attempt
        if last > 1:
            log.info("retry.succeeded", attempt=last)
        else:
            log.debug("retry.succeeded", attempt=last)
        return ExecutionResult.success(value, tuple(history))

    @staticmethod
    def _exhausted(log: Any, history: list[AttemptOutcome]) -> ExecutionResult[Any]:
        result: ExecutionResult[Any] = ExecutionResult.failure(tuple(history))
        log.error("retry.exhausted", attempts=len(history), **result.error.last_error.log_fields())  # type: ignore[union-attr]
        return result

    async def run(self, operation: Operation[T], policy: RetryPolicy | None = None) -> T:
        """Like :meth:`execute` but return the value or raise ``ExhaustedRetries``."""
        result = await self.execute(operation, policy)
        return result.unwrap()


__all__ = ["TenacityRetryingExecutor"]
