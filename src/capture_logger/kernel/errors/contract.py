"""Contract violations raised at the public boundary."""

from __future__ import annotations

from typing import Any

from capture_logger.kernel.errors.base import BaseError


class ContractViolationError(BaseError):
    """A required identifier was absent or invalid."""

    default_code = "contract_violation"

    def __init__(self, message: str, *, argument: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.argument = argument


def require(value: Any, argument: str) -> Any:
    """Return *value*, raising :class:`ContractViolationError` when it is ``None``."""
    if value is None:
        raise ContractViolationError(f"{argument} must not be None", argument=argument)
    return value


__all__ = ["ContractViolationError", "require"]
