"""
retrykit – retry async operations with per-attempt timeouts and exponential backoff.

Import path convention::

    from retrykit import RetryingTimeoutExecutor, RetryPolicy
    from retrykit.kernel.errors import ExhaustedRetries, AttemptTimeout
    from retrykit.config.settings import RetrySettings, EnvSettingsLoader
"""

from retrykit.config.validation import ConfigurationError
from retrykit.kernel.errors import AttemptTimeout, ExhaustedRetries, OperationFailure
from retrykit.resilience.retry import (
    AttemptOutcome,
    ExecutionResult,
    RetryingTimeoutExecutor,
    RetryPolicy,
    TenacityRetryingExecutor,
)

__version__ = "0.1.0"
__all__ = [
    "AttemptOutcome",
    "AttemptTimeout",
    "ConfigurationError",
    "ExecutionResult",
    "ExhaustedRetries",
    "OperationFailure",
    "RetryPolicy",
    "RetryingTimeoutExecutor",
    "TenacityRetryingExecutor",
    "__version__",
]
