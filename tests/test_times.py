"""Tests for relative-time descriptions."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from omnium import InvalidArgumentError, SystemClock, TimeUnit, format_relative, from_now

BOUNDARIES = [
    (timedelta(milliseconds=1), "1 ms"),
    (timedelta(milliseconds=2), "2 ms"),
    (timedelta(milliseconds=999), "999 ms"),
    (timedelta(milliseconds=1000), "1 sec"),
    (timedelta(milliseconds=1001), "1 sec"),
    (timedelta(milliseconds=1999), "1 sec"),
    (timedelta(milliseconds=2000), "2 secs"),
    (timedelta(milliseconds=2999), "2 secs"),
    (timedelta(seconds=59), "59 secs"),
    (timedelta(seconds=60), "1 min"),
    (timedelta(seconds=119), "2 mins"),
    (timedelta(seconds=120), "2 mins"),
    (timedelta(seconds=140), "2½ mins"),
    (timedelta(seconds=150), "2½ mins"),
    (timedelta(seconds=166), "3 mins"),
    (timedelta(seconds=180), "3 mins"),
    (timedelta(seconds=195), "3 mins"),
    (timedelta(minutes=15), "15 mins"),
    (timedelta(minutes=30), "30 mins"),
    (timedelta(minutes=45), "45 mins"),
    (timedelta(minutes=60), "1 hour"),
    (timedelta(minutes=140), "2½ hours"),
    (timedelta(minutes=150), "2½ hours"),
    (timedelta(minutes=166), "3 hours"),
    (timedelta(minutes=195), "3 hours"),
    (timedelta(hours=24), "1 day"),
    (timedelta(hours=36), "1½ days"),
    (timedelta(hours=43), "2 days"),
    (timedelta(hours=48), "2 days"),
    (timedelta(days=7), "1 week"),
    (timedelta(days=11), "1½ weeks"),
    (timedelta(days=14), "2 weeks"),
]


def test_same_instant_is_now(clock, now):
    assert from_now(now, clock) == "now"
    assert format_relative(now, now) == "now"


@pytest.mark.parametrize(("delta", "phrase"), BOUNDARIES)
def test_past(clock, now, delta, phrase):
    assert from_now(now - delta, clock) == f"{phrase} ago"


@pytest.mark.parametrize(("delta", "phrase"), BOUNDARIES)
def test_future(clock, now, delta, phrase):
    assert from_now(now + delta, clock) == f"in {phrase}"


def test_sub_millisecond_reference_noise_ignored():
    target = datetime(2020, 1, 1, 12, 0, 0, 5000, tzinfo=UTC)
    reference = target + timedelta(microseconds=999)
    assert format_relative(reference, target) == "now"
    assert format_relative(reference + timedelta(microseconds=1), target) == "1 ms ago"


def test_seconds_never_get_a_half(now):
    assert format_relative(now, now - timedelta(milliseconds=1600)) == "1 sec ago"


def test_half_unit_of_one_is_plural(now):
    assert format_relative(now, now - timedelta(seconds=90)) == "1½ mins ago"


def test_quarter_thresholds_are_exclusive(now):
    # 15 of 60 seconds is exactly 0.25, 45 of 60 is exactly 0.75
    assert format_relative(now, now - timedelta(seconds=75)) == "1 min ago"
    assert format_relative(now, now - timedelta(seconds=105)) == "1½ mins ago"


def test_offsets_do_not_matter(now):
    other_zone = now.astimezone(timezone(timedelta(hours=10)))
    assert format_relative(now, other_zone - timedelta(hours=24)) == "1 day ago"


def test_idempotent(now):
    target = now - timedelta(minutes=140)
    assert format_relative(now, target) == format_relative(now, target)


def test_system_clock_default():
    target = SystemClock().now() - timedelta(days=21)
    assert from_now(target) == "3 weeks ago"


@pytest.mark.parametrize(
    ("reference", "target", "argument"),
    [
        (None, datetime(2020, 1, 1, tzinfo=UTC), "reference"),
        (datetime(2020, 1, 1, tzinfo=UTC), None, "target"),
        (datetime(2020, 1, 1), datetime(2020, 1, 1, tzinfo=UTC), "reference"),
    ],
)
def test_invalid_arguments(reference, target, argument):
    with pytest.raises(InvalidArgumentError) as exc_info:
        format_relative(reference, target)
    assert exc_info.value.argument == argument


def test_from_now_rejects_none(clock):
    with pytest.raises(InvalidArgumentError) as exc_info:
        from_now(None, clock)
    assert exc_info.value.argument == "time"


class NaiveClock:
    def now(self) -> datetime:
        return datetime(2011, 3, 2)


def test_from_now_rejects_naive_clock(now):
    with pytest.raises(InvalidArgumentError) as exc_info:
        from_now(now, NaiveClock())
    assert exc_info.value.argument == "clock.now()"


def test_time_unit_order():
    assert [u.noun for u in TimeUnit] == ["week", "day", "hour", "min", "sec", "ms"]
    assert TimeUnit.HOUR.finer is TimeUnit.MINUTE
    assert TimeUnit.MILLISECOND.finer is None
    assert [u.finer for u in TimeUnit][:-1] == list(TimeUnit)[1:]
    assert TimeUnit.DAY.whole(36 * 60 * 60 * 1000) == 1
