"""Resilience – TimeoutPolicy."""
from __future__ import annotations

import dataclasses
from typing import Awaitable, Callable, TypeVar

from retrykit.config.validation import ConfigurationError, is_finite_number
from retrykit.resilience.timeouts.race import race_timeout

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class TimeoutPolicy:
    """Single-shot timeout wrapper: no retries, just the race.

    Raises :class:`~retrykit.kernel.errors.AttemptTimeout` on expiry; errors
    from the operation itself propagate unchanged.
    """
    timeout_seconds: float = 5.0
    cancel_on_timeout: bool = True

    def __post_init__(self) -> None:
        if not is_finite_number(self.timeout_seconds) or self.timeout_seconds <= 0:
            raise ConfigurationError(
                f"timeout_seconds must be a finite number > 0, got {self.timeout_seconds!r}",
                detail={"field": "timeout_seconds"},
            )

    async def execute(self, func: Callable[[], Awaitable[T]]) -> T:
        return await race_timeout(func, self.timeout_seconds, cancel=self.cancel_on_timeout)


__all__ = ["TimeoutPolicy"]
