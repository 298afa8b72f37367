"""Capture – EventBuilder for calls whose arguments are collected incrementally."""
from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from capture_logger.kernel.event import LogEvent
from capture_logger.kernel.level import Level

if TYPE_CHECKING:
    from capture_logger.capture.logger import CaptureLogger


class _Lazy:
    __slots__ = ("supplier",)

    def __init__(self, supplier: Callable[[], Any]) -> None:
        self.supplier = supplier


class EventBuilder:
    """Fluent builder returned by :meth:`CaptureLogger.at_level`.

    Arguments added with :meth:`add_argument` are kept verbatim, even when
    the last one is an error; only :meth:`set_cause` attaches an error::

        log.at_warn().add_marker(AUDIT).set_message("retry {}").add_argument(3).log()
    """

    def __init__(self, logger: "CaptureLogger", level: Level, *, enabled: bool = True) -> None:
        self._logger = logger
        self._level = level
        self._enabled = enabled
        self._message = ""
        self._args: list[Any] = []
        self._marker: Any = None
        self._cause: Any = None

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_message(self, message: str | Callable[[], str]) -> "EventBuilder":
        """Set the template; a callable is only evaluated when the event is logged."""
        self._message = message  # type: ignore[assignment]
        return self

    def add_argument(self, arg: Any) -> "EventBuilder":
        self._args.append(arg)
        return self

    def add_lazy_argument(self, supplier: Callable[[], Any]) -> "EventBuilder":
        """Append an argument computed only when the event is logged."""
        self._args.append(_Lazy(supplier))
        return self

    def add_marker(self, marker: Any) -> "EventBuilder":
        self._marker = marker
        return self

    def set_cause(self, cause: Any) -> "EventBuilder":
        self._cause = cause
        return self

    def log(self, message: str | None = None, *args: Any) -> LogEvent | None:
        """Record the event and return it, or ``None`` when the level is disabled."""
        if not self._enabled:
            return None
        if message is not None:
            self._message = message
        self._args.extend(args)
        template = self._message() if callable(self._message) else self._message
        resolved = [a.supplier() if isinstance(a, _Lazy) else a for a in self._args]

        event = LogEvent(self._level, self._logger.name, None, template)
        event._with_args(resolved or None)
        if self._cause is not None:
            event._with_thrown(self._cause)
        if self._marker is not None:
            event._with_marker(self._marker)
        self._logger._add_event(event)
        return event


__all__ = ["EventBuilder"]
