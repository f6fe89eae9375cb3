"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses

from retrykit.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Subclasses set ``_prefix`` (``RETRY`` → ``RETRY_MAX_ATTEMPTS``) and
    override :meth:`_validate` for cross-field checks.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    def _require(self, condition: bool, field: str, reason: str) -> None:
        if not condition:
            raise InvalidSettingValueError(self.env_key(field), getattr(self, field), reason)

    @classmethod
    def env_key(cls, field: str) -> str:
        """Environment variable name backing *field*."""
        return f"{cls._prefix}_{field}".upper().lstrip("_")


__all__ = ["Settings"]
