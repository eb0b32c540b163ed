"""LoggingThread — a named thread that logs its lifecycle and failures."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from omnium._internal.preconditions import check_not_none


class LoggingThread(threading.Thread):
    """Thread with a mandatory name whose uncaught exceptions go to *log*.

    An exception escaping *target* is logged at WARNING with its traceback
    instead of being handed to :func:`threading.excepthook`.

    Parameters:
        name:   Thread name, shown in logs and debuggers.
        log:    Logger that receives lifecycle and failure records.
        target: Callable run by the thread.
        args:   Positional arguments for *target*.
        kwargs: Keyword arguments for *target*.
        daemon: Passed through to :class:`threading.Thread`.
    """

    def __init__(
        self,
        name: str,
        log: logging.Logger,
        target: Callable[..., object],
        args: Iterable[Any] = (),
        kwargs: Mapping[str, Any] | None = None,
        *,
        daemon: bool | None = None,
    ) -> None:
        check_not_none(name, "name")
        check_not_none(log, "log")
        check_not_none(target, "target")
        super().__init__(name=name, target=target, args=args, kwargs=kwargs, daemon=daemon)
        self.log = log

    def run(self) -> None:
        self.log.debug("run(): thread spawned")
        try:
            super().run()
        except Exception as exc:
            self._uncaught(exc)
            return
        self.log.debug("run(): thread exited")
        self._completed()

    def _uncaught(self, exc: Exception) -> None:
        self.log.warning("Uncaught exception in thread %s", self.name, exc_info=exc)

    def _completed(self) -> None:
        """Called after *target* returns normally."""
