"""Kernel – levels, markers, captured events and the error hierarchy.

``LogEvent`` lives in :mod:`capture_logger.kernel.event`; it is not
re-exported here because it depends on the config layer.
"""

from capture_logger.kernel.errors import BaseError, ContractViolationError
from capture_logger.kernel.level import Level
from capture_logger.kernel.marker import Marker

__all__ = ["BaseError", "ContractViolationError", "Level", "Marker"]
