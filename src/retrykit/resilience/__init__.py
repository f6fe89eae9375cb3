"""Resilience – retrying timeout executor, backoff, jitter and timeout race."""

from retrykit.resilience.retry import (
    AttemptOutcome,
    ExecutionResult,
    RetryingTimeoutExecutor,
    RetryPolicy,
    TenacityRetryingExecutor,
)
from retrykit.resilience.timeouts import TimeoutPolicy, race_timeout

__all__ = [
    "AttemptOutcome",
    "ExecutionResult",
    "RetryPolicy",
    "RetryingTimeoutExecutor",
    "TenacityRetryingExecutor",
    "TimeoutPolicy",
    "race_timeout",
]
