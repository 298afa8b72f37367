"""Observability – message formatting and internal structured logging."""
from capture_logger.observability.logging.formatter import format_message, render_arg
from capture_logger.observability.logging.processors import CaptureContextProcessor, get_logger

__all__ = ["CaptureContextProcessor", "format_message", "get_logger", "render_arg"]
