"""Kernel errors – public re-export surface.

Hierarchy::

    BaseError
    ├── ContractViolationError   (contract.py)
    └── ConfigError              (capture_logger.config.validation)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from capture_logger.kernel.errors.base import BaseError
from capture_logger.kernel.errors.contract import ContractViolationError, require

__all__ = ["BaseError", "ContractViolationError", "require"]
