"""Observability – ambient logging context."""
from capture_logger.observability.context.context import LogContext

__all__ = ["LogContext"]
