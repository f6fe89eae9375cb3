"""Resilience – RetryPolicy."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Iterator

from retrykit.config.validation import ConfigurationError, is_finite_number
from retrykit.resilience.retry.backoff import ExponentialBackoff
from retrykit.resilience.retry.jitter import JitterStrategy, NoJitter, jitter_from_name

if TYPE_CHECKING:
    from retrykit.config.settings import RetrySettings


def _invalid(field: str, value: Any, reason: str) -> ConfigurationError:
    return ConfigurationError(
        f"Invalid retry policy: {field}={value!r} {reason}",
        detail={"field": field, "value": repr(value)},
    )


@dataclasses.dataclass(frozen=True)
class RetryPolicy:
    """Immutable retry configuration, validated on construction.

    Attributes
    ----------
    max_attempts:
        Total number of invocations, including the first one. ``1`` means no
        retries.
    initial_delay:
        Seconds to wait before the second attempt.
    backoff_multiplier:
        Each subsequent delay is the previous delay times this factor.
    per_attempt_timeout:
        Seconds a single attempt may run before it is abandoned and counted as
        an :class:`~retrykit.kernel.errors.AttemptTimeout`. ``None`` disables it.
    max_delay:
        Optional upper bound for a single backoff delay.
    jitter:
        Randomisation applied to every delay. Defaults to none.
    cancel_on_timeout:
        Cancel a timed-out attempt instead of merely abandoning it.

    Raises
    ------
    ConfigurationError
        When any field is out of range. No attempt is ever made with an
        invalid policy.
    """

    max_attempts: int = 3
    initial_delay: float = 1.0
    backoff_multiplier: float = 2.0
    per_attempt_timeout: float | None = None
    max_delay: float | None = None
    jitter: JitterStrategy = dataclasses.field(default_factory=NoJitter)
    cancel_on_timeout: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.max_attempts, int) or isinstance(self.max_attempts, bool):
            raise _invalid("max_attempts", self.max_attempts, "must be an integer")
        if self.max_attempts < 1:
            raise _invalid("max_attempts", self.max_attempts, "must be >= 1")
        for name in ("initial_delay", "backoff_multiplier"):
            value = getattr(self, name)
            if not is_finite_number(value):
                raise _invalid(name, value, "must be a finite number")
            if value < 0:
                raise _invalid(name, value, "must be >= 0")
        if self.per_attempt_timeout is not None:
            if not is_finite_number(self.per_attempt_timeout):
                raise _invalid("per_attempt_timeout", self.per_attempt_timeout, "must be a finite number")
            if self.per_attempt_timeout <= 0:
                raise _invalid("per_attempt_timeout", self.per_attempt_timeout, "must be > 0")
        if self.max_delay is not None:
            if not is_finite_number(self.max_delay) or self.max_delay < 0:
                raise _invalid("max_delay", self.max_delay, "must be a finite number >= 0")
        if not isinstance(self.jitter, JitterStrategy):
            raise _invalid("jitter", self.jitter, "must be a JitterStrategy")
        if self.max_attempts > 1 and not is_finite_number(self.backoff.compute(self.max_attempts - 1)):
            raise _invalid(
                "max_attempts",
                self.max_attempts,
                "grows the backoff delay past any finite value; set max_delay",
            )

    @property
    def backoff(self) -> ExponentialBackoff:
        return ExponentialBackoff(self.initial_delay, self.backoff_multiplier, self.max_delay)

    def delay_after(self, attempt: int) -> float:
        """Seconds to suspend after failed *attempt* before the next one starts."""
        return self.jitter.apply(self.backoff.compute(attempt))

    def delays(self) -> Iterator[float]:
        """Yield the planned delays between attempts (``max_attempts - 1`` values)."""
        for attempt in range(1, self.max_attempts):
            yield self.delay_after(attempt)

    def replace(self, **changes: Any) -> "RetryPolicy":
        """Return a validated copy with *changes* applied."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_settings(cls, settings: "RetrySettings") -> "RetryPolicy":
        try:
            jitter = jitter_from_name(settings.jitter)
        except ValueError as exc:
            raise _invalid("jitter", settings.jitter, "is not a known jitter strategy") from exc
        return cls(
            max_attempts=settings.max_attempts,
            initial_delay=settings.initial_delay,
            backoff_multiplier=settings.backoff_multiplier,
            per_attempt_timeout=settings.per_attempt_timeout,
            max_delay=settings.max_delay,
            jitter=jitter,
            cancel_on_timeout=settings.cancel_on_timeout,
        )


__all__ = ["RetryPolicy"]
