"""Benchmark driver — average bubble sort time over random arrays.

Every iteration sorts a freshly generated array, so no partially sorted
state carries over between runs.
"""

from __future__ import annotations

import logging
import random

from domain.models import BenchmarkResult, SortOrder
from modules.sort_engine.core import bubble_sort

logger = logging.getLogger("bubblesort.benchmark")

# Signed 32-bit range.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def generate_array(size: int, rng: random.Random | None = None) -> list[int]:
    """Return ``size`` independent uniform integers from the signed 32-bit range.

    Negative sizes produce an empty list.

    Args:
        size: Number of elements.
        rng: Random source; a fresh unseeded ``random.Random`` when omitted.
    """
    source = rng if rng is not None else random.Random()
    return [source.randint(INT_MIN, INT_MAX) for _ in range(max(size, 0))]


def run_benchmark(
    array_size: int,
    iterations: int,
    *,
    rng: random.Random | None = None,
) -> BenchmarkResult:
    """Sort ``iterations`` random arrays ascending and average the time.

    Args:
        array_size: Length of each generated array. Recorded as given.
        iterations: Number of arrays to sort. Values <= 0 perform no sort
            and report an average of 0.
        rng: Random source shared by all iterations; pass a seeded one for
            reproducible inputs.

    Returns:
        The requested size, the mean execution time in nanoseconds and the
        number of sorts performed.
    """
    if iterations <= 0:
        logger.debug("Benchmark skipped: iterations=%d", iterations)
        return BenchmarkResult(array_size=array_size, average_time_ns=0.0, iterations=0)

    source = rng if rng is not None else random.Random()
    total_ns = 0
    for _ in range(iterations):
        arr = generate_array(array_size, source)
        total_ns += bubble_sort(arr, SortOrder.ASC).execution_time_ns

    result = BenchmarkResult(
        array_size=array_size,
        average_time_ns=total_ns / iterations,
        iterations=iterations,
    )
    logger.info(
        "Benchmark: size=%d iterations=%d average=%.2fns",
        array_size,
        iterations,
        result.average_time_ns,
    )
    return result
