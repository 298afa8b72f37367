"""Testing fixtures – pytest fixtures for capture loggers."""
try:
    import pytest  # noqa: F401

    from capture_logger.testing.fixtures.capture import capture_logger, log_context

except ImportError:
    pass

__all__ = ["capture_logger", "log_context"]
