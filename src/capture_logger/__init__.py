"""
capture_logger – a logger test double that records calls for assertion.

Import path convention::

    from capture_logger import CaptureLogger, Level, LogContext
    from capture_logger.testing import assert_that, assert_event

In ``conftest.py``::

    pytest_plugins = ["capture_logger.testing.fixtures"]
"""

from capture_logger.capture import CaptureLogger, EventBuilder, ResetOnClose, get_capture_logger
from capture_logger.kernel import ContractViolationError, Level, Marker
from capture_logger.kernel.event import LogEvent
from capture_logger.observability import LogContext, format_message

__version__ = "0.1.0"
__all__ = [
    "CaptureLogger",
    "ContractViolationError",
    "EventBuilder",
    "Level",
    "LogContext",
    "LogEvent",
    "Marker",
    "ResetOnClose",
    "__version__",
    "format_message",
    "get_capture_logger",
]
