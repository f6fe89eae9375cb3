"""Kernel – framework-agnostic building blocks: errors, result variants, clock."""

from retrykit.kernel.errors import (
    ApplicationError,
    AttemptError,
    AttemptTimeout,
    BaseError,
    ExhaustedRetries,
    OperationFailure,
)
from retrykit.kernel.time import Clock, SystemClock
from retrykit.kernel.types import Err, Ok, Result

__all__ = [
    "ApplicationError",
    "AttemptError",
    "AttemptTimeout",
    "BaseError",
    "Clock",
    "Err",
    "ExhaustedRetries",
    "Ok",
    "OperationFailure",
    "Result",
    "SystemClock",
]
