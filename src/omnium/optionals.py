"""Bridges from raising calls to optional results."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from omnium._internal.preconditions import check_not_none

logger = logging.getLogger(__name__)

R = TypeVar("R")


def try_call(block: Callable[..., R], *args: Any, **kwargs: Any) -> R | None:
    """Call ``block(*args, **kwargs)`` and return its result.

    Any :class:`Exception` raised by *block* is logged at DEBUG and turned
    into ``None``.  A *block* that itself returns ``None`` is indistinguishable
    from one that failed.
    """
    check_not_none(block, "block")
    try:
        return block(*args, **kwargs)
    except Exception:
        logger.debug("try_call(): %r raised, returning None", block, exc_info=True)
        return None
