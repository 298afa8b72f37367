"""Capture – CaptureLogger, a logger that records calls instead of emitting them.

Every ``CaptureLogger`` lives in a process-wide directory keyed by name::

    log = CaptureLogger.get_logger("orders")
    with log.reset_on_close():
        log.set_level(Level.TRACE)
        log.info("answer:{}", 42)
        assert log.events_at_level(Level.INFO)[0].formatted_message == "answer:42"

Events are partitioned by level; each level's bucket has its own lock, so
recording at different levels (or on different loggers) never contends.
"""
from __future__ import annotations

import contextlib
import threading
import types
from collections.abc import Callable, Iterator, Sequence
from typing import Any

from capture_logger.capture.builder import EventBuilder
from capture_logger.capture.scoped import ResetOnClose
from capture_logger.config.settings.capture import load_settings
from capture_logger.kernel.errors import require
from capture_logger.kernel.event import ErrorPredicate, LogEvent, is_error
from capture_logger.kernel.level import Level
from capture_logger.observability.logging import get_logger as get_structlog_logger

Observer = Callable[[LogEvent], Any]

_log = get_structlog_logger(__name__)


def _blackhole(event: LogEvent) -> None:  # noqa: ARG001
    return None


class _Defaults:
    """Process-wide fallbacks for loggers without an override."""

    def __init__(self) -> None:
        self.level: Level = Level.parse(load_settings().default_level)
        self.observer: Observer = _blackhole


_defaults = _Defaults()
_directory: dict[str, "CaptureLogger"] = {}
_directory_lock = threading.Lock()


class _Bucket:
    __slots__ = ("events", "lock")

    def __init__(self) -> None:
        self.events: list[LogEvent] = []
        self.lock = threading.Lock()


def _resolve_name(name: Any) -> str:
    require(name, "logger name")
    if isinstance(name, str):
        return name
    if isinstance(name, types.ModuleType):
        return name.__name__
    if isinstance(name, type):
        return f"{name.__module__}.{name.__qualname__}"
    return str(name)


class CaptureLogger:
    """Named, independently configurable registry of captured events."""

    # ------------------------------------------------------------------
    # Process-wide directory and defaults
    # ------------------------------------------------------------------

    @classmethod
    def get_logger(cls, name: Any) -> "CaptureLogger":
        """Return the logger for *name*, creating it on first use.

        *name* may be a string, a class or a module.
        """
        key = _resolve_name(name)
        existing = _directory.get(key)
        if existing is not None:
            return existing
        with _directory_lock:
            existing = _directory.get(key)
            if existing is None:
                existing = _directory[key] = cls(key)
                _log.debug("capture_logger.created", logger_name=key)
            return existing

    @staticmethod
    def set_default_level(level: Level) -> None:
        """Change the level used by loggers that have no level of their own."""
        _defaults.level = Level.parse(require(level, "default level"))
        _log.debug("capture_logger.default_level", level=_defaults.level.name)

    @staticmethod
    def get_default_level() -> Level:
        return _defaults.level

    @staticmethod
    def set_on_all_events(observer: Observer | None) -> None:
        """Set the observer used by loggers without one; ``None`` restores the no-op."""
        _defaults.observer = observer if observer is not None else _blackhole

    @staticmethod
    def all_events_at_level(level: Level) -> list[LogEvent]:
        """Events of *level* across every logger (per-logger order preserved)."""
        with _directory_lock:
            loggers = list(_directory.values())
        events: list[LogEvent] = []
        for capture in loggers:
            events.extend(capture.events_at_level(level))
        return events

    @staticmethod
    def reset_all() -> None:
        """Clear the events of every logger in the directory."""
        with _directory_lock:
            loggers = list(_directory.values())
        for capture in loggers:
            capture.reset()
        _log.debug("capture_logger.reset_all", loggers=len(loggers))

    # ------------------------------------------------------------------
    # Instance
    # ------------------------------------------------------------------

    def __init__(self, name: str, *, is_error: ErrorPredicate = is_error) -> None:
        self._name = require(name, "logger name")
        self._is_error = is_error
        self._buckets: dict[Level, _Bucket] = {level: _Bucket() for level in Level}
        self._level: Level | None = None
        self._on_event: Observer | None = None

    def __repr__(self) -> str:
        return f"CaptureLogger(name={self._name!r}, level={self.effective_level.name})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> Level | None:
        """The level override of this logger, or ``None`` when it uses the default."""
        return self._level

    @property
    def effective_level(self) -> Level:
        level = self._level
        return level if level is not None else _defaults.level

    @property
    def on_event(self) -> Observer | None:
        return self._on_event

    def set_level(self, level: Level | None) -> "CaptureLogger":
        self._level = Level.parse(level) if level is not None else None
        return self

    def set_on_event(self, observer: Observer | None) -> "CaptureLogger":
        self._on_event = observer
        return self

    def is_enabled(self, level: Level) -> bool:
        return Level.parse(require(level, "level")) >= self.effective_level

    def is_trace_enabled(self, marker: Any = None) -> bool:  # noqa: ARG002
        return self.is_enabled(Level.TRACE)

    def is_debug_enabled(self, marker: Any = None) -> bool:  # noqa: ARG002
        return self.is_enabled(Level.DEBUG)

    def is_info_enabled(self, marker: Any = None) -> bool:  # noqa: ARG002
        return self.is_enabled(Level.INFO)

    def is_warn_enabled(self, marker: Any = None) -> bool:  # noqa: ARG002
        return self.is_enabled(Level.WARN)

    def is_error_enabled(self, marker: Any = None) -> bool:  # noqa: ARG002
        return self.is_enabled(Level.ERROR)

    # ------------------------------------------------------------------
    # Logging entry points
    # ------------------------------------------------------------------

    def log(self, level: Level, message: str, *args: Any, marker: Any = None, exc: Any = None) -> None:
        if self.is_enabled(level):
            self.record(level, marker, message, args or None, exc)

    def trace(self, message: str, *args: Any, marker: Any = None, exc: Any = None) -> None:
        self.log(Level.TRACE, message, *args, marker=marker, exc=exc)

    def debug(self, message: str, *args: Any, marker: Any = None, exc: Any = None) -> None:
        self.log(Level.DEBUG, message, *args, marker=marker, exc=exc)

    def info(self, message: str, *args: Any, marker: Any = None, exc: Any = None) -> None:
        self.log(Level.INFO, message, *args, marker=marker, exc=exc)

    def warn(self, message: str, *args: Any, marker: Any = None, exc: Any = None) -> None:
        self.log(Level.WARN, message, *args, marker=marker, exc=exc)

    warning = warn

    def error(self, message: str, *args: Any, marker: Any = None, exc: Any = None) -> None:
        self.log(Level.ERROR, message, *args, marker=marker, exc=exc)

    def at_level(self, level: Level) -> EventBuilder:
        """Start a fluent call; a disabled level yields a no-op builder."""
        level = Level.parse(require(level, "level"))
        return EventBuilder(self, level, enabled=self.is_enabled(level))

    def at_trace(self) -> EventBuilder:
        return self.at_level(Level.TRACE)

    def at_debug(self) -> EventBuilder:
        return self.at_level(Level.DEBUG)

    def at_info(self) -> EventBuilder:
        return self.at_level(Level.INFO)

    def at_warn(self) -> EventBuilder:
        return self.at_level(Level.WARN)

    def at_error(self) -> EventBuilder:
        return self.at_level(Level.ERROR)

    def record(
        self,
        level: Level,
        marker: Any,
        message: str,
        args: Sequence[Any] | None = None,
        thrown: Any = None,
    ) -> LogEvent:
        """Capture one call regardless of the configured level.

        Observer errors propagate to the caller; the event stays recorded.
        """
        level = Level.parse(require(level, "level"))
        event = LogEvent(level, self._name, marker, message, args, thrown, is_error=self._is_error)
        self._add_event(event)
        return event

    def _add_event(self, event: LogEvent) -> None:
        bucket = self._buckets[event.level]
        with bucket.lock:
            bucket.events.append(event)
        observer = self._on_event
        (observer if observer is not None else _defaults.observer)(event)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def events_at_level(self, level: Level) -> tuple[LogEvent, ...]:
        bucket = self._buckets[Level.parse(require(level, "level"))]
        with bucket.lock:
            return tuple(bucket.events)

    def event_map(self) -> dict[Level, tuple[LogEvent, ...]]:
        """Snapshot of every non-empty level."""
        with self._all_locks():
            return {level: tuple(b.events) for level, b in self._buckets.items() if b.events}

    def all_events(self) -> list[LogEvent]:
        """Every event of this logger in the order they were created."""
        with self._all_locks():
            events = [event for bucket in self._buckets.values() for event in bucket.events]
        events.sort(key=lambda e: e.event_id)
        return events

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------

    def clear_events_at_level(self, level: Level) -> None:
        bucket = self._buckets[Level.parse(require(level, "level"))]
        with bucket.lock:
            bucket.events.clear()

    def reset(self) -> None:
        with self._all_locks():
            for bucket in self._buckets.values():
                bucket.events.clear()

    def reset_on_close(self) -> ResetOnClose:
        """Guard that restores level and observer overrides and resets on close.

        Usage::

            with log.reset_on_close():
                log.set_level(Level.TRACE)
                ...
        """
        starting_level = self._level
        starting_observer = self._on_event

        def restore() -> None:
            self._level = starting_level
            self._on_event = starting_observer
            self.reset()

        return ResetOnClose(restore)

    @contextlib.contextmanager
    def _all_locks(self) -> Iterator[None]:
        # Level order is fixed, so multi-level operations cannot deadlock.
        with contextlib.ExitStack() as stack:
            for level in Level:
                stack.enter_context(self._buckets[level].lock)
            yield


def get_capture_logger(name: Any) -> CaptureLogger:
    """Module-level shortcut for :meth:`CaptureLogger.get_logger`."""
    return CaptureLogger.get_logger(name)


__all__ = ["CaptureLogger", "Observer", "get_capture_logger"]
