"""Custom exceptions for the omnium package."""

from __future__ import annotations


class OmniumError(Exception):
    """Base exception for all omnium errors."""


class InvalidArgumentError(OmniumError, ValueError):
    """Raised when a required argument is missing or malformed."""

    def __init__(self, argument: str, detail: str = "") -> None:
        self.argument = argument
        msg = f"Invalid argument '{argument}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class NoSuchElementError(OmniumError, LookupError):
    """Raised when an ``Either`` is read from the side it does not hold."""

    def __init__(self, side: str) -> None:
        self.side = side
        super().__init__(f"Either has no {side} value")
