"""Either — a value that is one of two possible types.

By convention ``Left`` holds a failure and ``Right`` a success, but the type
itself attaches no meaning to either side.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from omnium._internal.preconditions import check_not_none
from omnium.exceptions import NoSuchElementError

L = TypeVar("L")
R = TypeVar("R")
M = TypeVar("M")


class Either(ABC, Generic[L, R]):
    """Disjoint union of a left and a right value.

    Build instances with :meth:`Either.left` and :meth:`Either.right`; the two
    concrete variants are :class:`Left` and :class:`Right`.
    """

    __slots__ = ()

    # ── factory helpers ──────────────────────────────────────

    @staticmethod
    def left(value: L) -> Either[L, Any]:
        return Left(value)

    @staticmethod
    def right(value: R) -> Either[Any, R]:
        return Right(value)

    # ── queries ──────────────────────────────────────────────

    @property
    @abstractmethod
    def is_left(self) -> bool: ...

    @property
    def is_right(self) -> bool:
        return not self.is_left

    @abstractmethod
    def get_left(self) -> L:
        """Return the left value.  Raises :class:`NoSuchElementError` on a ``Right``."""

    @abstractmethod
    def get_right(self) -> R:
        """Return the right value.  Raises :class:`NoSuchElementError` on a ``Left``."""

    # ── transformation ───────────────────────────────────────

    @abstractmethod
    def map_left(self, function: Callable[[L], M]) -> Either[M, R]: ...

    @abstractmethod
    def map_right(self, function: Callable[[R], M]) -> Either[L, M]: ...

    def copy_left(self) -> Either[L, Any]:
        """Re-wrap the left value so the right type can change."""
        return Either.left(self.get_left())

    def copy_right(self) -> Either[Any, R]:
        """Re-wrap the right value so the left type can change."""
        return Either.right(self.get_right())

    # ── side effects ─────────────────────────────────────────

    def if_left(self, block: Callable[[L], object]) -> None:
        if self.is_left:
            block(self.get_left())

    def if_right(self, block: Callable[[R], object]) -> None:
        if self.is_right:
            block(self.get_right())


@dataclass(frozen=True, slots=True)
class Left(Either[L, R]):
    value: L

    def __post_init__(self) -> None:
        check_not_none(self.value, "left")

    @property
    def is_left(self) -> bool:
        return True

    def get_left(self) -> L:
        return self.value

    def get_right(self) -> R:
        raise NoSuchElementError("right")

    def map_left(self, function: Callable[[L], M]) -> Either[M, R]:
        return Left(function(self.value))

    def map_right(self, function: Callable[[R], M]) -> Either[L, M]:
        return self  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class Right(Either[L, R]):
    value: R

    def __post_init__(self) -> None:
        check_not_none(self.value, "right")

    @property
    def is_left(self) -> bool:
        return False

    def get_left(self) -> L:
        raise NoSuchElementError("left")

    def get_right(self) -> R:
        return self.value

    def map_left(self, function: Callable[[L], M]) -> Either[M, R]:
        return self  # type: ignore[return-value]

    def map_right(self, function: Callable[[R], M]) -> Either[L, M]:
        return Right(function(self.value))
