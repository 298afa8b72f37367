"""Config settings – 12-factor env-based configuration."""
from capture_logger.config.settings.base import Settings
from capture_logger.config.settings.capture import CaptureSettings, load_settings
from capture_logger.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["CaptureSettings", "EnvSettingsLoader", "Settings", "SettingsLoader", "load_settings"]
