"""
wiring.py — Boundary layer mapping each service operation to its module.

Callers (the CLI, or any embedding application) talk to this file in terms
of the boundary types from ``domain.models`` (SortInput, SortResponse,
ValidationResult). The modules underneath work on plain lists and never
see those wrappers.

No operation here raises for degenerate input: a missing list is treated
as empty and an unknown order as ascending.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from domain.models import (
    AlgorithmInfo,
    BenchmarkResult,
    HealthReport,
    SortInput,
    SortMetrics,
    SortOrder,
    SortResponse,
    ValidationResult,
)
from kernel.config import VERSION
from modules.benchmark import core as _benchmark
from modules.health import core as _health
from modules.sort_engine import core as _sort_engine
from modules.validator import core as _validator

logger = logging.getLogger("bubblesort.wiring")


def execute_bubble_sort(sort_input: SortInput | None) -> SortResponse:
    """Sort ``sort_input.elements`` in place.

    Returns:
        The sort metrics and the same list object, now sorted. A missing
        input or missing elements yield zero metrics and an empty list.
    """
    if sort_input is None or sort_input.elements is None:
        logger.debug("execute_bubble_sort: no elements supplied")
        return SortResponse(metrics=SortMetrics(0, 0, 0), sorted_elements=[])

    metrics = _sort_engine.bubble_sort(sort_input.elements, sort_input.order)
    return SortResponse(metrics=metrics, sorted_elements=sort_input.elements)


def validate_sort(elements: list[int] | None, order: object = SortOrder.ASC) -> ValidationResult:
    """Check ``elements`` against ``order`` and stamp the result."""
    return ValidationResult(
        sorted_elements=elements if elements is not None else [],
        is_sorted=_validator.is_sorted(elements, order),
        timestamp=datetime.now(UTC).isoformat(),
    )


def run_benchmark(array_size: int, iterations: int) -> BenchmarkResult:
    """Average the sort time over ``iterations`` random arrays."""
    return _benchmark.run_benchmark(array_size, iterations)


def get_algorithm_info() -> AlgorithmInfo:
    """Return name, stability and complexity of the algorithm."""
    return _sort_engine.algorithm_info()


def health_check() -> HealthReport:
    """Report service status."""
    return _health.health_check(VERSION)
