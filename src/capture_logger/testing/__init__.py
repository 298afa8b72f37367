"""Testing support – fluent assertions and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["capture_logger.testing.fixtures"]
"""

from capture_logger.testing.assertions import LogEventAssert, LogEventListAssert, assert_event, assert_that

__all__ = ["LogEventAssert", "LogEventListAssert", "assert_event", "assert_that"]
