"""Observability – ambient context, message formatting, internal logging."""

from capture_logger.observability.context import LogContext
from capture_logger.observability.logging import CaptureContextProcessor, format_message, get_logger

__all__ = ["CaptureContextProcessor", "LogContext", "format_message", "get_logger"]
