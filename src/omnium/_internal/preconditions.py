"""Argument checks shared by the public entry points."""

from __future__ import annotations

from datetime import datetime
from typing import TypeVar

from omnium.exceptions import InvalidArgumentError

T = TypeVar("T")


def check_not_none(value: T | None, argument: str) -> T:
    """Return *value*, or raise :class:`InvalidArgumentError` if it is ``None``."""
    if value is None:
        raise InvalidArgumentError(argument, "cannot be None")
    return value


def check_instant(value: datetime | None, argument: str) -> datetime:
    """Return *value* if it is a timezone-aware datetime.

    Naive datetimes are rejected: they name a wall-clock reading, not a point
    on the timeline, and cannot be ordered against aware ones.
    """
    check_not_none(value, argument)
    if not isinstance(value, datetime):
        raise InvalidArgumentError(argument, f"expected datetime, got {type(value).__name__}")
    if value.tzinfo is None or value.utcoffset() is None:
        raise InvalidArgumentError(argument, "must be timezone-aware")
    return value
