"""Config – 12-factor settings, loaders and validation errors."""

from retrykit.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    RetrySettings,
    Settings,
    SettingsLoader,
)
from retrykit.config.validation import (
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigurationError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RetrySettings",
    "Settings",
    "SettingsLoader",
]
