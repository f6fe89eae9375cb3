"""Resilience – per-attempt records and the consolidated execution result."""
from __future__ import annotations

import dataclasses
from typing import Any, Generic, TypeVar

from retrykit.kernel.errors import AttemptError, AttemptTimeout, ExhaustedRetries
from retrykit.kernel.types import Err, Ok

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class AttemptOutcome:
    """What happened during one attempt of one execution."""

    attempt: int
    succeeded: bool
    value: Any = None
    error: AttemptError | None = None
    elapsed: float = 0.0
    delay_before: float = 0.0

    @property
    def timed_out(self) -> bool:
        return isinstance(self.error, AttemptTimeout)


@dataclasses.dataclass(frozen=True)
class ExecutionResult(Generic[T]):
    """Final state of one execution: a value *or* an :class:`ExhaustedRetries`."""

    outcome: Ok[T] | Err[ExhaustedRetries]
    history: tuple[AttemptOutcome, ...] = ()

    @classmethod
    def success(cls, value: T, history: tuple[AttemptOutcome, ...]) -> "ExecutionResult[T]":
        return cls(Ok(value), history)

    @classmethod
    def failure(cls, history: tuple[AttemptOutcome, ...]) -> "ExecutionResult[T]":
        last = history[-1].error
        if last is None:
            raise ValueError("failure() requires the last attempt to carry an error")
        return cls(Err(ExhaustedRetries(last, attempts=len(history), history=history)), history)

    @property
    def succeeded(self) -> bool:
        return self.outcome.is_ok()

    @property
    def attempts(self) -> int:
        return len(self.history)

    @property
    def value(self) -> T | None:
        if isinstance(self.outcome, Ok):
            return self.outcome.value
        return None

    @property
    def error(self) -> ExhaustedRetries | None:
        if isinstance(self.outcome, Err):
            return self.outcome.error
        return None

    def unwrap(self) -> T:
        """Return the value, or raise the :class:`ExhaustedRetries`."""
        return self.outcome.unwrap()


__all__ = ["AttemptOutcome", "ExecutionResult"]
