"""omnium — small general-purpose helpers.

The core is time handling: approximate relative-time phrases
(``from_now``) and business-day dates with a non-midnight boundary
(``LogicalDateResolver``).  Around it sit a few value types and mapping
helpers; thread wrappers live in :mod:`omnium.thread`.
"""

from omnium.clock import Clock, DelegatingClock, FixedClock, SystemClock
from omnium.either import Either, Left, Right
from omnium.exceptions import InvalidArgumentError, NoSuchElementError, OmniumError
from omnium.logical_date import LogicalDateConfig, LogicalDateResolver
from omnium.maps import key_transform, transform_values, unique_index
from omnium.optionals import try_call
from omnium.times import TimeUnit, format_relative, from_now
from omnium.tuples import Tuple2

__all__ = [
    "Clock",
    "DelegatingClock",
    "Either",
    "FixedClock",
    "InvalidArgumentError",
    "Left",
    "LogicalDateConfig",
    "LogicalDateResolver",
    "NoSuchElementError",
    "OmniumError",
    "Right",
    "SystemClock",
    "TimeUnit",
    "Tuple2",
    "format_relative",
    "from_now",
    "key_transform",
    "transform_values",
    "try_call",
    "unique_index",
]
