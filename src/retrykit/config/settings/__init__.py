"""Config settings – 12-factor env-based configuration."""
from retrykit.config.settings.base import Settings
from retrykit.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from retrykit.config.settings.retry import RetrySettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "RetrySettings", "Settings", "SettingsLoader"]
