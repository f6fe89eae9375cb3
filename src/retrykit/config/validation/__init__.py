"""Config validation errors and value checks."""
from retrykit.config.validation.checks import is_finite_number
from retrykit.config.validation.errors import (
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = ["ConfigurationError", "InvalidSettingValueError", "MissingRequiredSettingError", "is_finite_number"]
