"""Sortedness check for integer lists."""

from __future__ import annotations

import logging

from domain.models import SortOrder

logger = logging.getLogger("bubblesort.validator")


def is_sorted(elements: list[int] | None, order: object = SortOrder.ASC) -> bool:
    """Return True if every adjacent pair respects ``order``.

    ``None``, empty and single-element lists are vacuously sorted. The list
    is only read.
    """
    if elements is None or len(elements) <= 1:
        return True

    ascending = SortOrder.parse(order) is SortOrder.ASC
    for i in range(len(elements) - 1):
        left, right = elements[i], elements[i + 1]
        if (left > right) if ascending else (left < right):
            logger.debug("Out of order at index %d: %d, %d", i, left, right)
            return False
    return True
