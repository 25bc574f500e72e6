"""Page counting and per-page slicing."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import TypeVar

from tagpages.core.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def validate_per_page(per_page: int | None) -> int:
    """Return ``per_page`` if it can drive pagination, raise otherwise."""
    if per_page is None:
        msg = "Pagination is enabled but no per-page size is configured"
        raise InvalidConfigurationError(msg)
    if isinstance(per_page, bool) or not isinstance(per_page, int):
        msg = f"Per-page size must be an integer, got {type(per_page).__name__}"
        raise InvalidConfigurationError(msg)
    if per_page <= 0:
        msg = f"Per-page size must be positive, got {per_page}"
        raise InvalidConfigurationError(msg)
    return per_page


def page_count(item_count: int, per_page: int) -> int:
    """Number of pages needed for ``item_count`` items.

    An empty tag still gets one (empty) index page.

    Raises:
        InvalidConfigurationError: If ``per_page`` is not a positive integer.
        ValueError: If ``item_count`` is negative.

    """
    per_page = validate_per_page(per_page)
    if item_count < 0:
        msg = f"Item count cannot be negative, got {item_count}"
        raise ValueError(msg)
    return max(1, math.ceil(item_count / per_page))


def slice_items(items: Sequence[T], per_page: int, page: int) -> list[T]:
    """Items shown on 1-based ``page`` when showing ``per_page`` per page.

    The last page holds the remainder. A page outside ``1..page_count``
    yields an empty list.
    """
    per_page = validate_per_page(per_page)
    start = (page - 1) * per_page
    if page < 1 or start >= len(items):
        if items:
            logger.debug("Page %d is out of range for %d items, returning no items", page, len(items))
        return []
    end = min(start + per_page, len(items))
    return list(items[start:end])
