"""Relative-time descriptions ("2½ hours ago", "in 3 mins").

The description is approximate, with the error growing with the distance
from *now*.  A delta of more than an hour (but less than a day) is reported
in half-hour steps, more than a day in half-day steps, and so on.  Seconds
are whole, and anything under a second is reported in raw milliseconds.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
from typing import TYPE_CHECKING

from omnium._internal.preconditions import check_instant
from omnium.clock import SystemClock

if TYPE_CHECKING:
    from omnium.clock import Clock

_ONE_MS = timedelta(milliseconds=1)
_HALF = "½"


class TimeUnit(Enum):
    """Reporting granularities, largest first."""

    WEEK = (7 * 24 * 60 * 60 * 1000, "week")
    DAY = (24 * 60 * 60 * 1000, "day")
    HOUR = (60 * 60 * 1000, "hour")
    MINUTE = (60 * 1000, "min")
    SECOND = (1000, "sec")
    MILLISECOND = (1, "ms")

    def __init__(self, millis: int, noun: str) -> None:
        self.millis = millis
        self.noun = noun

    @property
    def finer(self) -> TimeUnit | None:
        """The next-smaller unit, or ``None`` for ``MILLISECOND``."""
        return _FINER.get(self)

    def whole(self, millis: int) -> int:
        """Number of whole units in *millis*."""
        return millis // self.millis


# Units considered, in order, when picking the dominant one.
_DOMINANT_UNITS = (TimeUnit.WEEK, TimeUnit.DAY, TimeUnit.HOUR, TimeUnit.MINUTE, TimeUnit.SECOND)

_FINER = dict(zip(TimeUnit, list(TimeUnit)[1:]))


def format_relative(reference: datetime, target: datetime) -> str:
    """Describe *target* as a delta from *reference*.

    Returns ``"now"``, ``"<phrase> ago"`` or ``"in <phrase>"``.  Both
    arguments must be timezone-aware; sub-millisecond precision in
    *reference* is ignored.

    Raises:
        InvalidArgumentError: if either argument is ``None`` or naive.
    """
    reference = check_instant(reference, "reference")
    target = check_instant(target, "target")
    return _describe(reference, target)


def from_now(time: datetime, clock: Clock | None = None) -> str:
    """Describe *time* as a delta from the current instant of *clock*.

    Uses the system clock when *clock* is omitted.
    """
    time = check_instant(time, "time")
    clock = clock or SystemClock()
    return _describe(check_instant(clock.now(), "clock.now()"), time)


def _describe(reference: datetime, target: datetime) -> str:
    now = _truncate_to_millis(reference)
    if target == now:
        return "now"

    past = target < now
    narrative = _narrative(abs(target - now) // _ONE_MS)
    return f"{narrative} ago" if past else f"in {narrative}"


def _truncate_to_millis(instant: datetime) -> datetime:
    return instant.replace(microsecond=instant.microsecond - instant.microsecond % 1000)


def _narrative(millis: int) -> str:
    for unit in _DOMINANT_UNITS:
        whole = unit.whole(millis)
        if whole <= 0:
            continue
        if unit is TimeUnit.SECOND:
            # half a second is not worth reporting
            return _format(unit, whole, 0.0)

        finer = unit.finer
        remainder = millis - whole * unit.millis
        fraction = finer.whole(remainder) / (unit.millis // finer.millis)
        return _format(unit, whole, fraction)

    return f"{millis} {TimeUnit.MILLISECOND.noun}"


def _format(unit: TimeUnit, units: int, fraction: float) -> str:
    """Render *units* of *unit*, rounded to the nearest half unit."""
    half = False
    if fraction > 0.75:
        units += 1
    elif fraction > 0.25:
        half = True

    # "1½" reads as more than one, so it takes the plural
    count = units + 1 if half else units
    noun = unit.noun + ("s" if count > 1 else "")
    return f"{units}{_HALF if half else ''} {noun}"
