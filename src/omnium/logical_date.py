"""LogicalDateResolver — business-day dates with a non-midnight day boundary.

A logical date is one where the day does not run midnight-to-midnight but
from some business-defined local time, such as 4:00 am.  An instant at
02:30 local time on the 5th therefore belongs to the logical date of the 4th.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, ValidationError, field_serializer, field_validator

from omnium._internal.preconditions import check_instant, check_not_none
from omnium.clock import SystemClock
from omnium.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from omnium.clock import Clock


class LogicalDateConfig(BaseModel):
    """Immutable day-boundary configuration.

    Attributes:
        start_of_day: Local (naive) time at which a logical day begins.
                      Accepts ``"HH:MM[:SS]"`` strings.
        timezone:     Zone the boundary is measured in.  Accepts IANA keys
                      such as ``"Europe/Stockholm"``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    start_of_day: time
    timezone: ZoneInfo

    @field_validator("start_of_day")
    @classmethod
    def _require_local_time(cls, value: time) -> time:
        if value.tzinfo is not None:
            raise ValueError("start_of_day must be a local time without tzinfo")
        return value

    @field_validator("timezone", mode="before")
    @classmethod
    def _load_zone(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return ZoneInfo(value)
            except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
                raise ValueError(f"unknown timezone {value!r}") from exc
        return value

    @field_serializer("timezone")
    def _zone_key(self, zone: ZoneInfo) -> str:
        return zone.key


class LogicalDateResolver:
    """Maps instants to logical dates for a fixed start-of-day and timezone.

    The start of day is inclusive: an instant landing exactly on it belongs
    to that calendar date, not the previous one.  Daylight-saving and offset
    changes are left entirely to ``zoneinfo``.

    Parameters:
        start_of_day: Local time at which the logical day begins.
        timezone:     Zone (or IANA key) the local time is measured in.

    Raises:
        InvalidArgumentError: if either argument is missing or malformed.
    """

    def __init__(self, start_of_day: time | str, timezone: ZoneInfo | str) -> None:
        check_not_none(start_of_day, "start_of_day")
        check_not_none(timezone, "timezone")
        try:
            self._config = LogicalDateConfig(start_of_day=start_of_day, timezone=timezone)
        except ValidationError as exc:
            error = exc.errors()[0]
            raise InvalidArgumentError(str(error["loc"][0]), error["msg"]) from exc

    @classmethod
    def from_config(cls, config: LogicalDateConfig) -> LogicalDateResolver:
        check_not_none(config, "config")
        return cls(config.start_of_day, config.timezone)

    @property
    def config(self) -> LogicalDateConfig:
        return self._config

    @property
    def start_of_day(self) -> time:
        return self._config.start_of_day

    @property
    def timezone(self) -> ZoneInfo:
        return self._config.timezone

    def logical_date(self, instant: datetime) -> date:
        """Return the logical (not the actual) local date of *instant*."""
        instant = check_instant(instant, "instant")

        local = instant.astimezone(self._config.timezone)
        if local.time() >= self._config.start_of_day:
            return local.date()
        return local.date() - timedelta(days=1)

    def today(self, clock: Clock | None = None) -> date:
        """Logical date of the current instant of *clock* (system clock by default)."""
        clock = clock or SystemClock()
        return self.logical_date(clock.now())

    def __repr__(self) -> str:
        return (
            f"LogicalDateResolver(start_of_day={self.start_of_day.isoformat()!r}, "
            f"timezone={self.timezone.key!r})"
        )
