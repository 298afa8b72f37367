"""Observability – structlog processors and get_logger helper.

``CaptureContextProcessor`` injects the ambient :class:`LogContext` into log
events; ``get_logger(name)`` returns a structlog logger bound to a stdlib
logger, so the library stays silent unless the host configures logging.
"""
from __future__ import annotations

import logging
from typing import Any

import structlog

from capture_logger.observability.context import LogContext

_PROCESSORS: list[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.stdlib.render_to_log_kwargs,
]


class CaptureContextProcessor:
    """structlog processor that copies the current :class:`LogContext` into events.

    Keys already present in the event dict win over context values.

    Usage::

        import structlog
        from capture_logger.observability.logging import CaptureContextProcessor

        structlog.configure(processors=[CaptureContextProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for key, value in LogContext.snapshot().items():
            event_dict.setdefault(key, value)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger that forwards to ``logging.getLogger(name)``.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["CaptureContextProcessor", "get_logger"]
