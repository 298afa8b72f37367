"""Kernel – LogEvent, one normalised capture of a single logging call.

A ``LogEvent`` is built once by the logger that captured it.  Construction
snapshots the ambient :class:`LogContext`, the wall clock and the calling
thread, and separates a trailing error from the message arguments::

    log.error("fail - {} {}", 1, 2, exc)      # args == (1, 2), thrown is exc
    log.error("fail - {}", exc)               # args is None, thrown is exc

An error passed explicitly is never re-derived from the arguments.
"""
from __future__ import annotations

import itertools
import threading
import traceback
from collections.abc import Callable, Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

from capture_logger.config.settings.capture import load_settings
from capture_logger.kernel.level import Level
from capture_logger.observability.context import LogContext
from capture_logger.observability.logging.formatter import format_message

ErrorPredicate = Callable[[object], bool]

_ids = itertools.count(1)
_ids_lock = threading.Lock()


def is_error(value: object) -> bool:
    """Default error-type test used to detect a trailing error argument."""
    return isinstance(value, BaseException)


def next_event_id() -> int:
    with _ids_lock:
        return next(_ids)


def stack_top(error: BaseException | None) -> traceback.FrameSummary | None:
    """Return the frame nearest the raise site of *error*, if it was raised."""
    if error is None or error.__traceback__ is None:
        return None
    frames = traceback.extract_tb(error.__traceback__)
    return frames[-1] if frames else None


def split_thrown(
    args: Sequence[Any] | None,
    thrown: Any = None,
    is_error: ErrorPredicate = is_error,
) -> tuple[tuple[Any, ...] | None, Any]:
    """Separate the attached error from the message arguments.

    Returns ``(message_args, thrown)``.
    """
    message_args = tuple(args) if args is not None else None
    if thrown is not None:
        return message_args, thrown
    if not message_args or not is_error(message_args[-1]):
        return message_args, None
    return (message_args[:-1] or None), message_args[-1]


class LogEvent:
    """Immutable record of one captured logging call.

    The ``_with_*`` mutators exist for the owning logger only, while it is
    assembling an event whose arguments were collected incrementally.
    """

    __slots__ = (
        "_event_id",
        "_context_map",
        "_level",
        "_logger_name",
        "_marker",
        "_message",
        "_message_args",
        "_time_millis",
        "_source",
        "_thread_name",
        "_thrown",
    )

    def __init__(
        self,
        level: Level,
        logger_name: str,
        marker: Any = None,
        message: str = "",
        args: Sequence[Any] | None = None,
        thrown: Any = None,
        *,
        is_error: ErrorPredicate = is_error,
    ) -> None:
        self._event_id = next_event_id()
        self._context_map: Mapping[str, str] = LogContext.snapshot()
        self._time_millis = int(datetime.now(UTC).timestamp() * 1000)
        self._thread_name = threading.current_thread().name
        self._level = level
        self._logger_name = logger_name
        self._marker = marker
        self._message = message
        self._message_args, self._thrown = split_thrown(args, thrown, is_error)
        self._source = stack_top(self._thrown) if isinstance(self._thrown, BaseException) else None

    @classmethod
    def construct(
        cls,
        level: Level,
        logger_name: str,
        marker: Any,
        message: str,
        args: Sequence[Any] | None,
        thrown: Any,
        *,
        is_error: ErrorPredicate = is_error,
    ) -> "LogEvent":
        return cls(level, logger_name, marker, message, args, thrown, is_error=is_error)

    # ------------------------------------------------------------------
    # Post-construction mutators (owning logger only)
    # ------------------------------------------------------------------

    def _with_args(self, args: Sequence[Any] | None) -> "LogEvent":
        self._message_args = tuple(args) if args is not None else None
        return self

    def _with_thrown(self, thrown: Any) -> "LogEvent":
        self._thrown = thrown
        self._source = stack_top(thrown) if isinstance(thrown, BaseException) else None
        return self

    def _with_marker(self, marker: Any) -> "LogEvent":
        self._marker = marker
        return self

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def event_id(self) -> int:
        return self._event_id

    @property
    def context_map(self) -> Mapping[str, str]:
        return self._context_map

    @property
    def level(self) -> Level:
        return self._level

    @property
    def logger_name(self) -> str:
        return self._logger_name

    @property
    def marker(self) -> Any:
        return self._marker

    @property
    def message(self) -> str:
        """The message template as passed by the caller."""
        return self._message

    @property
    def formatted_message(self) -> str | None:
        return format_message(self._message, self._message_args)

    @property
    def message_args(self) -> tuple[Any, ...] | None:
        return self._message_args

    @property
    def time_millis(self) -> int:
        return self._time_millis

    @property
    def time_string(self) -> str:
        return datetime.fromtimestamp(self._time_millis / 1000, UTC).replace(tzinfo=None).isoformat(timespec="milliseconds")

    @property
    def source(self) -> traceback.FrameSummary | None:
        return self._source

    @property
    def thread_name(self) -> str:
        return self._thread_name

    @property
    def thrown(self) -> Any:
        return self._thrown

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def thrown_data(self, stack_limit: int | None = None) -> str:
        """Render the attached error with at most *stack_limit* frames.

        Frames are listed nearest-the-raise-site first.  The default limit is
        ``CAPTURE_STACK_LIMIT`` (10), read on every call.
        """
        if self._thrown is None:
            raise ValueError("event has no attached error")
        if stack_limit is None:
            stack_limit = load_settings().stack_limit
        parts = [repr(self._thrown)]
        tb = getattr(self._thrown, "__traceback__", None)
        frames = list(reversed(traceback.extract_tb(tb))) if tb is not None else []
        for frame in frames[:stack_limit]:
            parts.append(f"\n\t@ {frame.filename}:{frame.lineno} in {frame.name}")
        if len(frames) > stack_limit:
            parts.append("\n\t...")
        return "".join(parts)

    def __str__(self) -> str:
        thrown = "\n" + self.thrown_data() if self._thrown is not None else ""
        return "%5s %s [%s] %s - %s%s" % (
            self._level.name,
            self.time_string,
            self._thread_name,
            self._logger_name,
            self.formatted_message,
            thrown,
        )

    def __repr__(self) -> str:
        return (
            f"LogEvent(event_id={self._event_id}, level={self._level.name}, "
            f"logger_name={self._logger_name!r}, message={self._message!r}, "
            f"message_args={self._message_args!r}, thrown={self._thrown!r})"
        )


__all__ = ["ErrorPredicate", "LogEvent", "is_error", "next_event_id", "split_thrown", "stack_top"]
