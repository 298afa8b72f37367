"""Kernel – severity levels."""
from __future__ import annotations

from enum import IntEnum
from typing import Any

from capture_logger.kernel.errors import ContractViolationError


class Level(IntEnum):
    """Ordered severity levels; comparison is the only behaviour they carry."""

    TRACE = 0
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @classmethod
    def parse(cls, value: Any) -> "Level":
        """Coerce a :class:`Level`, its int value, or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        elif isinstance(value, str):
            name = value.strip().upper()
            if name == "WARNING":
                name = "WARN"
            if name in cls.__members__:
                return cls[name]
        raise ContractViolationError(f"Unknown log level {value!r}", argument="level")

    def __str__(self) -> str:
        return self.name


__all__ = ["Level"]
