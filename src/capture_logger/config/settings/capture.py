"""Config settings – CaptureSettings and the env-backed accessor."""
from __future__ import annotations

import dataclasses

from capture_logger.config.settings.base import Settings
from capture_logger.config.settings.loaders import EnvSettingsLoader
from capture_logger.config.validation import InvalidSettingValueError

_LEVEL_NAMES = frozenset({"TRACE", "DEBUG", "INFO", "WARN", "WARNING", "ERROR"})


@dataclasses.dataclass
class CaptureSettings(Settings):
    """Tunables read from ``CAPTURE_*`` environment variables.

    ``default_level``
        Initial process-wide minimum level for loggers without an override.
    ``stack_limit``
        Number of frames rendered by :meth:`LogEvent.thrown_data`.
    """

    _prefix: dataclasses.ClassVar[str] = "CAPTURE"

    default_level: str = "INFO"
    stack_limit: int = 10

    def _validate(self) -> None:
        if self.default_level.strip().upper() not in _LEVEL_NAMES:
            raise InvalidSettingValueError(
                "default_level", self.default_level, "expected one of TRACE, DEBUG, INFO, WARN, ERROR"
            )
        if self.stack_limit < 0:
            raise InvalidSettingValueError("stack_limit", self.stack_limit, "must be >= 0")


def load_settings() -> CaptureSettings:
    """Load :class:`CaptureSettings` from the current environment.

    Not cached: callers see environment changes on the next call.
    """
    return EnvSettingsLoader().load(CaptureSettings)


__all__ = ["CaptureSettings", "load_settings"]
