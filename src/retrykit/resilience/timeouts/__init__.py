"""Resilience – timeout race and standalone timeout policy."""
from retrykit.resilience.timeouts.policy import TimeoutPolicy
from retrykit.resilience.timeouts.race import OperationCancelledError, race_timeout

__all__ = ["OperationCancelledError", "TimeoutPolicy", "race_timeout"]
