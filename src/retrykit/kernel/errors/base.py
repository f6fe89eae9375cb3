"""Root error class for retrykit.

Every error the executors record or raise is a :class:`BaseError`: a
machine-readable ``code``, a human-readable ``message`` and a ``detail`` dict
that stays JSON-serialisable, so the same object can be logged, stored in an
attempt history or returned to a caller unchanged.
"""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the retrykit error hierarchy.

    Subclasses set ``default_code``; ``detail`` carries per-attempt context
    such as ``attempt`` or ``timeout_seconds``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form, e.g. for an attempt history export."""
        payload: dict[str, Any] = {
            "type": self.error_type,
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def log_fields(self) -> dict[str, Any]:
        """Flat ``error`` / ``error_code`` keys for structured log events."""
        fields: dict[str, Any] = {"error": self.message, "error_code": self.code}
        if self.cause is not None:
            fields["error_cause"] = type(self.cause).__name__
        return fields

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{self.error_type}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
