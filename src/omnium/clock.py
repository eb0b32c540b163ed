"""Clock abstraction for testable time-dependent logic."""

from __future__ import annotations

import threading
from datetime import UTC, datetime
from typing import Protocol

from omnium._internal.preconditions import check_instant, check_not_none


class Clock(Protocol):
    """Protocol for getting the current time.  Inject a fake in tests."""

    def now(self) -> datetime: ...


class SystemClock:
    """Default clock backed by the real system time."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedClock:
    """Clock that always reports the same instant."""

    def __init__(self, instant: datetime) -> None:
        self._instant = check_instant(instant, "instant")

    def now(self) -> datetime:
        return self._instant

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()})"


class DelegatingClock:
    """Clock that forwards to a swappable delegate.

    Most useful with :class:`FixedClock`: hand a ``DelegatingClock`` to the
    code under test once, then move time along by swapping the fixed clock
    underneath it.  Reads and writes of the delegate share one lock, so a
    lookup never observes a half-swapped clock.
    """

    def __init__(self, delegate: Clock) -> None:
        self._lock = threading.Lock()
        self._delegate = check_not_none(delegate, "delegate")

    @property
    def delegate(self) -> Clock:
        with self._lock:
            return self._delegate

    def set_delegate(self, delegate: Clock) -> None:
        """Replace the clock used to service ``now()``."""
        check_not_none(delegate, "delegate")
        with self._lock:
            self._delegate = delegate

    def now(self) -> datetime:
        with self._lock:
            return self._delegate.now()
