"""Config settings – RetrySettings (``RETRY_*`` environment variables)."""
from __future__ import annotations

import dataclasses
import logging

from retrykit.config.settings.base import Settings

JITTER_NAMES = ("none", "full", "equal")


@dataclasses.dataclass
class RetrySettings(Settings):
    """Environment-driven defaults for :class:`~retrykit.resilience.retry.RetryPolicy`.

    Numeric ranges are enforced when the policy is built
    (``RetryPolicy.from_settings``); this class only checks what the policy
    cannot see.
    """

    _prefix: dataclasses.ClassVar[str] = "RETRY"

    max_attempts: int = 3
    initial_delay: float = 1.0
    backoff_multiplier: float = 2.0
    per_attempt_timeout: float | None = None
    max_delay: float | None = None
    jitter: str = "none"
    cancel_on_timeout: bool = True
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        self.jitter = self.jitter.strip().lower()
        self._require(self.jitter in JITTER_NAMES, "jitter", f"expected one of {JITTER_NAMES}")
        self.log_level = self.log_level.strip().upper()
        self._require(
            isinstance(logging.getLevelName(self.log_level), int),
            "log_level",
            "not a logging level name",
        )


__all__ = ["JITTER_NAMES", "RetrySettings"]
