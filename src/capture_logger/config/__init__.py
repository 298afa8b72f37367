"""Config – env-backed settings and validation errors."""

from capture_logger.config.settings import CaptureSettings, EnvSettingsLoader, Settings, SettingsLoader, load_settings
from capture_logger.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "CaptureSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "load_settings",
]
