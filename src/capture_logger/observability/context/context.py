"""Observability – LogContext, the ambient key/value store attached to events."""
from __future__ import annotations

import contextlib
from collections.abc import Iterator, Mapping
from contextvars import ContextVar
from types import MappingProxyType

from capture_logger.kernel.errors import ContractViolationError

_EMPTY: Mapping[str, str] = MappingProxyType({})

# Values are never mutated in place; every write installs a fresh dict.
_CTX_VAR: ContextVar[Mapping[str, str]] = ContextVar("_capture_log_ctx", default=_EMPTY)


def _check(key: object, value: object = "") -> None:
    if not isinstance(key, str):
        raise ContractViolationError(f"context key must be a str, got {key!r}", argument="key")
    if not isinstance(value, str):
        raise ContractViolationError(f"context value for {key!r} must be a str, got {value!r}", argument="value")


class LogContext:
    """Ambient logging context stored in a ``ContextVar``.

    Each thread and each asyncio task sees its own mapping.
    """

    @staticmethod
    def put(key: str, value: str) -> None:
        _check(key, value)
        _CTX_VAR.set(MappingProxyType({**_CTX_VAR.get(), key: value}))

    @staticmethod
    def get(key: str) -> str | None:
        return _CTX_VAR.get().get(key)

    @staticmethod
    def remove(key: str) -> None:
        current = _CTX_VAR.get()
        if key in current:
            _CTX_VAR.set(MappingProxyType({k: v for k, v in current.items() if k != key}))

    @staticmethod
    def clear() -> None:
        _CTX_VAR.set(_EMPTY)

    @staticmethod
    def snapshot() -> Mapping[str, str]:
        """Return an immutable point-in-time copy of the current context."""
        current = _CTX_VAR.get()
        if not current:
            return _EMPTY
        return MappingProxyType(dict(current))

    @staticmethod
    @contextlib.contextmanager
    def scoped(**values: str) -> Iterator[Mapping[str, str]]:
        """Add *values* for the duration of the ``with`` block."""
        for key, value in values.items():
            _check(key, value)
        token = _CTX_VAR.set(MappingProxyType({**_CTX_VAR.get(), **values}))
        try:
            yield _CTX_VAR.get()
        finally:
            _CTX_VAR.reset(token)

    @staticmethod
    def put_scoped(key: str, value: str) -> contextlib.AbstractContextManager[Mapping[str, str]]:
        """Single-entry form of :meth:`scoped`; also accepts non-identifier keys."""
        _check(key, value)
        return LogContext.scoped(**{key: value})


__all__ = ["LogContext"]
