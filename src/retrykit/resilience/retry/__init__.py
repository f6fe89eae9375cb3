"""Resilience – retry with per-attempt timeouts and exponential backoff."""
from retrykit.resilience.retry.backoff import BackoffStrategy, ExponentialBackoff
from retrykit.resilience.retry.executor import Operation, RetryingTimeoutExecutor
from retrykit.resilience.retry.jitter import EqualJitter, FullJitter, JitterStrategy, NoJitter, jitter_from_name
from retrykit.resilience.retry.outcome import AttemptOutcome, ExecutionResult
from retrykit.resilience.retry.policy import RetryPolicy
from retrykit.resilience.retry.tenacity_adapter import TenacityRetryingExecutor

__all__ = [
    "AttemptOutcome", "BackoffStrategy", "EqualJitter", "ExecutionResult",
    "ExponentialBackoff", "FullJitter", "JitterStrategy", "NoJitter", "Operation",
    "RetryPolicy", "RetryingTimeoutExecutor", "TenacityRetryingExecutor", "jitter_from_name",
]
