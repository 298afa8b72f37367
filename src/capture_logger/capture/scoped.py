"""Capture – ResetOnClose guard."""
from __future__ import annotations

import threading
from collections.abc import Callable
from types import TracebackType


class ResetOnClose:
    """Run a restore action exactly once when the guard is closed.

    Usable as a context manager; exceptions raised inside the ``with`` block
    propagate after the action has run.
    """

    def __init__(self, on_close: Callable[[], None]) -> None:
        if on_close is None:
            raise ValueError("on_close must not be None")
        self._on_close = on_close
        self._closed = False
        self._lock = threading.Lock()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._on_close()

    def __enter__(self) -> "ResetOnClose":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["ResetOnClose"]
