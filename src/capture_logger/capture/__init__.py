"""Capture – named capture loggers, fluent builder and reset guard."""
from capture_logger.capture.builder import EventBuilder
from capture_logger.capture.logger import CaptureLogger, Observer, get_capture_logger
from capture_logger.capture.scoped import ResetOnClose

__all__ = ["CaptureLogger", "EventBuilder", "Observer", "ResetOnClose", "get_capture_logger"]
