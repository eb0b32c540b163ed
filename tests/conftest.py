"""Shared test fixtures."""

from datetime import UTC, datetime, time

import pytest

from omnium import FixedClock, LogicalDateResolver


@pytest.fixture
def now():
    return datetime(2011, 3, 2, 20, 30, 0, 123000, tzinfo=UTC)


@pytest.fixture
def clock(now):
    return FixedClock(now)


@pytest.fixture
def stockholm_resolver():
    return LogicalDateResolver(time(4, 0), "Europe/Stockholm")
