"""PerpetualThread — a thread that is never expected to finish.

Every perpetual thread that exits, normally or not, leaves an obituary in
the process-wide :class:`PerpetualThreadRegistry`.  A health check can then
report ``PerpetualThreadRegistry.get().notice()`` to surface dead workers.
"""

from __future__ import annotations

import threading
from typing import ClassVar

from omnium.thread.logging_thread import LoggingThread


class PerpetualThread(LoggingThread):
    """A :class:`LoggingThread` whose exit is recorded in the registry."""

    def _completed(self) -> None:
        PerpetualThreadRegistry.get()._add_obituary(self, None)

    def _uncaught(self, exc: Exception) -> None:
        self.log.warning("Uncaught exception in perpetual thread '%s'", self.name, exc_info=exc)
        PerpetualThreadRegistry.get()._add_obituary(self, exc)


class PerpetualThreadRegistry:
    """Process-wide record of perpetual threads that have exited."""

    _instance: ClassVar[PerpetualThreadRegistry | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._obituaries: dict[threading.Thread, BaseException | None] = {}

    @classmethod
    def get(cls) -> PerpetualThreadRegistry:
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def notice(self) -> str | None:
        """Describe every exited thread, or ``None`` if all are still running."""
        with self._lock:
            if not self._obituaries:
                return None
            return "; ".join(
                f"{thread.name} died from {cause!r}"
                if cause is not None
                else f"{thread.name} completed the run() method"
                for thread, cause in self._obituaries.items()
            )

    def clear(self) -> None:
        """Forget all obituaries."""
        with self._lock:
            self._obituaries.clear()

    def _add_obituary(self, thread: threading.Thread, cause: BaseException | None) -> None:
        with self._lock:
            self._obituaries[thread] = cause
