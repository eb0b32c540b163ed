"""Tuple2 — an immutable pair."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from omnium._internal.preconditions import check_not_none

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True, slots=True)
class Tuple2(Generic[A, B]):
    """Immutable pair of two non-``None`` values.

    Unpacks like a tuple::

        first, second = Tuple2.of("a", 1)
    """

    first: A
    second: B

    def __post_init__(self) -> None:
        check_not_none(self.first, "first")
        check_not_none(self.second, "second")

    @staticmethod
    def of(first: A, second: B) -> Tuple2[A, B]:
        return Tuple2(first, second)

    @staticmethod
    def from_entry(entry: tuple[A, B]) -> Tuple2[A, B]:
        """Build a pair from a ``(key, value)`` item, e.g. from ``dict.items()``."""
        check_not_none(entry, "entry")
        key, value = entry
        return Tuple2.of(key, value)

    def map_first(self, function: Callable[[A], C]) -> Tuple2[C, B]:
        check_not_none(function, "function")
        return Tuple2.of(function(self.first), self.second)

    def map_second(self, function: Callable[[B], C]) -> Tuple2[A, C]:
        check_not_none(function, "function")
        return Tuple2.of(self.first, function(self.second))

    def reverse(self) -> Tuple2[B, A]:
        return Tuple2.of(self.second, self.first)

    def as_mapping(self) -> Mapping[A, B]:
        """Read-only single-entry mapping of ``first`` to ``second``."""
        return MappingProxyType({self.first: self.second})

    def __iter__(self) -> Iterator[Any]:
        yield self.first
        yield self.second

    def __str__(self) -> str:
        return f"({self.first}, {self.second})"
