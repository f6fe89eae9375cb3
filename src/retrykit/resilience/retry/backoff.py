"""Resilience – backoff strategies."""
from __future__ import annotations

import abc
import math


class BackoffStrategy(abc.ABC):
    """Compute wait duration (seconds) after the *attempt*-th failure (1-based)."""

    @abc.abstractmethod
    def compute(self, attempt: int) -> float: ...


class ExponentialBackoff(BackoffStrategy):
    """Delay grows geometrically: ``initial_delay * multiplier^(attempt - 1)``.

    The delay after the first failure is exactly ``initial_delay``; each later
    delay is the previous one times ``multiplier``, optionally capped at
    ``max_delay``.
    """

    def __init__(
        self,
        initial_delay: float = 1.0,
        multiplier: float = 2.0,
        max_delay: float | None = None,
    ) -> None:
        self._initial = initial_delay
        self._multiplier = multiplier
        self._max = max_delay

    def compute(self, attempt: int) -> float:
        if self._initial == 0:
            return 0.0
        try:
            delay = self._initial * (float(self._multiplier) ** (attempt - 1))
        except OverflowError:
            delay = math.inf
        if self._max is not None:
            return min(delay, self._max)
        return delay


__all__ = ["BackoffStrategy", "ExponentialBackoff"]
