"""Shared fixtures for the capture-logger test-suite."""

from __future__ import annotations

import pytest

from capture_logger import CaptureLogger, Level, LogContext
from capture_logger.testing.fixtures import capture_logger, log_context  # noqa: F401


@pytest.fixture(autouse=True)
def _restore_process_defaults():
    """Every test starts from INFO / no-op observer / empty context."""
    CaptureLogger.set_default_level(Level.INFO)
    CaptureLogger.set_on_all_events(None)
    LogContext.clear()
    yield
    CaptureLogger.set_default_level(Level.INFO)
    CaptureLogger.set_on_all_events(None)
    CaptureLogger.reset_all()
    LogContext.clear()
