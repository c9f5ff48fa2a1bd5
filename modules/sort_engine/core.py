"""Sort engine — in-place bubble sort with comparison/swap/time metrics.

Adjacent-pair passes with early termination: a pass that exchanges nothing
proves the list sorted. Best case n-1 comparisons, worst case n(n-1)/2
comparisons and swaps.
"""

from __future__ import annotations

import logging
import time

from domain.models import AlgorithmInfo, SortMetrics, SortOrder

logger = logging.getLogger("bubblesort.sort_engine")

_ALGORITHM_INFO = AlgorithmInfo()


def bubble_sort(elements: list[int] | None, order: object = SortOrder.ASC) -> SortMetrics:
    """Sort ``elements`` in place and report what it took.

    Equal neighbours are never exchanged, so the sort is stable.

    Args:
        elements: List to sort. ``None`` is treated as an empty list.
        order: Requested direction; anything ``SortOrder.parse`` does not
            recognise as descending sorts ascending.

    Returns:
        Comparison count, swap count and elapsed nanoseconds of this call.
    """
    start = time.perf_counter_ns()
    if elements is None or len(elements) <= 1:
        return SortMetrics(0, 0, time.perf_counter_ns() - start)

    ascending = SortOrder.parse(order) is SortOrder.ASC
    n = len(elements)
    comparisons = 0
    swaps = 0

    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            comparisons += 1
            left, right = elements[j], elements[j + 1]
            if (left > right) if ascending else (left < right):
                elements[j], elements[j + 1] = right, left
                swaps += 1
                swapped = True
        if not swapped:
            break

    metrics = SortMetrics(comparisons, swaps, time.perf_counter_ns() - start)
    logger.debug(
        "Sorted %d elements (%s): comparisons=%d swaps=%d time=%dns",
        n,
        "ASC" if ascending else "DESC",
        metrics.comparison_count,
        metrics.swap_count,
        metrics.execution_time_ns,
    )
    return metrics


def algorithm_info() -> AlgorithmInfo:
    """Return the fixed description of the algorithm."""
    return _ALGORITHM_INFO
