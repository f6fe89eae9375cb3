"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError          (application.py)
        ├── AttemptError
        │   ├── OperationFailure
        │   └── AttemptTimeout
        ├── ExhaustedRetries
        └── ConfigurationError    (retrykit.config.validation)
"""

from retrykit.kernel.errors.application import (
    ApplicationError,
    AttemptError,
    AttemptTimeout,
    ExhaustedRetries,
    OperationFailure,
)
from retrykit.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "AttemptError",
    "AttemptTimeout",
    "BaseError",
    "ExhaustedRetries",
    "OperationFailure",
]
