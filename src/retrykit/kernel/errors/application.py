"""Application-layer errors raised and recorded by the retry executors."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from retrykit.kernel.errors.base import BaseError

if TYPE_CHECKING:
    from retrykit.resilience.retry.outcome import AttemptOutcome


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class AttemptError(ApplicationError):
    """A single attempt did not succeed. Always retryable."""

    default_code = "attempt_error"

    def __init__(self, message: str, *, attempt: int = 1, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.attempt = attempt
        self.detail.setdefault("attempt", attempt)


class OperationFailure(AttemptError):
    """The wrapped operation itself raised."""

    default_code = "operation_failure"

    @classmethod
    def from_exception(cls, exc: BaseException, *, attempt: int = 1) -> "OperationFailure":
        return cls(
            f"Attempt {attempt} failed: {exc}",
            attempt=attempt,
            cause=exc,
            detail={"exception_type": type(exc).__name__},
        )


class AttemptTimeout(AttemptError):
    """The attempt exceeded its per-attempt timeout and was abandoned."""

    default_code = "attempt_timeout"

    def __init__(
        self,
        timeout_seconds: float,
        *,
        attempt: int = 1,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"Attempt {attempt} timed out after {timeout_seconds}s",
            attempt=attempt,
            **kwargs,
        )
        self.timeout_seconds = timeout_seconds
        self.detail.setdefault("timeout_seconds", timeout_seconds)


class ExhaustedRetries(ApplicationError):
    """Every permitted attempt failed.

    ``last_error`` is the canonical cause; ``history`` keeps every
    intermediate :class:`~retrykit.resilience.retry.outcome.AttemptOutcome`.
    """

    default_code = "exhausted_retries"

    def __init__(
        self,
        last_error: AttemptError,
        *,
        attempts: int,
        history: tuple["AttemptOutcome", ...] = (),
    ) -> None:
        super().__init__(
            f"Gave up after {attempts} attempt(s): {last_error.message}",
            cause=last_error,
            detail={"attempts": attempts, "last_error_code": last_error.code},
        )
        self.last_error = last_error
        self.attempts = attempts
        self.history = history

    @property
    def timed_out(self) -> bool:
        """``True`` when the final attempt was abandoned on timeout."""
        return isinstance(self.last_error, AttemptTimeout)


__all__ = [
    "ApplicationError",
    "AttemptError",
    "AttemptTimeout",
    "ExhaustedRetries",
    "OperationFailure",
]
