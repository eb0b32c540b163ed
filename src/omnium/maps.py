"""Mapping helpers: re-keying, indexing and lazy value views."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Generic, TypeVar

from omnium._internal.preconditions import check_not_none
from omnium.exceptions import InvalidArgumentError

K = TypeVar("K")
K2 = TypeVar("K2")
V = TypeVar("V")
V2 = TypeVar("V2")


def key_transform(mapping: Mapping[K, V], function: Callable[[K], K2]) -> Mapping[K2, V]:
    """Return a copy of *mapping* with every key passed through *function*.

    The result keeps the flavour of the input:

    * a ``dict`` (or subclass) yields the same type,
    * a read-only ``MappingProxyType`` yields a read-only proxy,
    * anything else yields a plain ``dict``.

    Raises:
        InvalidArgumentError: if two keys transform to the same new key.
    """
    check_not_none(mapping, "mapping")
    check_not_none(function, "function")

    result: dict[K2, V] = {}
    for key, value in mapping.items():
        new_key = function(key)
        if new_key in result:
            raise InvalidArgumentError("function", f"keys collide on {new_key!r}")
        result[new_key] = value

    if isinstance(mapping, MappingProxyType):
        return MappingProxyType(result)
    if isinstance(mapping, dict) and type(mapping) is not dict:
        try:
            return type(mapping)(result)
        except TypeError:
            # e.g. defaultdict, whose constructor wants a factory first
            copy = mapping.copy()
            copy.clear()
            copy.update(result)
            return copy
    return result


def unique_index(values: Iterable[V], key_function: Callable[[V], K]) -> Mapping[K, V]:
    """Index *values* by ``key_function(value)`` into a read-only mapping.

    Iteration order follows *values*.

    Raises:
        InvalidArgumentError: if two values produce the same key.
    """
    check_not_none(values, "values")
    check_not_none(key_function, "key_function")

    index: dict[K, V] = {}
    for value in values:
        key = key_function(value)
        if key in index:
            raise InvalidArgumentError(
                "values", f"duplicate key {key!r} for {index[key]!r} and {value!r}"
            )
        index[key] = value
    return MappingProxyType(index)


def transform_values(mapping: Mapping[K, V], function: Callable[[V], V2]) -> Mapping[K, V2]:
    """Return a live read-only view of *mapping* with *function* applied to each value.

    Nothing is copied: *function* runs on every lookup, and changes to
    *mapping* show through the view.
    """
    check_not_none(mapping, "mapping")
    check_not_none(function, "function")
    return TransformedValues(mapping, function)


class TransformedValues(Mapping[K, V2], Generic[K, V, V2]):
    """Read-only mapping view returned by :func:`transform_values`."""

    def __init__(self, source: Mapping[K, V], function: Callable[[V], V2]) -> None:
        self._source = source
        self._function = function

    def __getitem__(self, key: K) -> V2:
        return self._function(self._source[key])

    def __iter__(self) -> Iterator[K]:
        return iter(self._source)

    def __len__(self) -> int:
        return len(self._source)

    def __contains__(self, key: object) -> bool:
        return key in self._source

    def __repr__(self) -> str:
        return f"TransformedValues({dict(self)!r})"
