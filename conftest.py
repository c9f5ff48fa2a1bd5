"""Shared pytest fixtures and test factories for bubblesort.

Provides:
- Factory functions for the domain models with sensible defaults
- Seeded random sources for reproducible "random" inputs
- A plain console backend so output can be asserted with ``capsys``
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

import pytest

from domain.models import BenchmarkResult, SortInput, SortMetrics, SortOrder
from kernel import console as console_pkg
from kernel.console._plain import PlainBackend

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


# ── Domain Model Factories ───────────────────────────────────────────────


def make_metrics(
    comparison_count: int = 0,
    swap_count: int = 0,
    execution_time_ns: int = 0,
) -> SortMetrics:
    """Create a SortMetrics with sensible defaults."""
    return SortMetrics(
        comparison_count=comparison_count,
        swap_count=swap_count,
        execution_time_ns=execution_time_ns,
    )


def make_sort_input(
    elements: list[int] | None = None,
    order: SortOrder = SortOrder.ASC,
) -> SortInput:
    """Create a SortInput; defaults to the demonstration array."""
    if elements is None:
        elements = [64, 34, 25, 12, 22, 11, 90]
    return SortInput(elements=elements, order=order)


def make_benchmark_result(
    array_size: int = 100,
    average_time_ns: float = 1_500.0,
    iterations: int = 10,
) -> BenchmarkResult:
    """Create a BenchmarkResult with sensible defaults."""
    return BenchmarkResult(
        array_size=array_size,
        average_time_ns=average_time_ns,
        iterations=iterations,
    )


def random_lists(
    seed: int,
    count: int,
    max_len: int = 30,
    low: int = -50,
    high: int = 50,
) -> list[list[int]]:
    """Reproducible random lists; a narrow value range forces duplicates."""
    rng = random.Random(seed)
    return [
        [rng.randint(low, high) for _ in range(rng.randint(0, max_len))] for _ in range(count)
    ]


# ── Pytest Fixtures ──────────────────────────────────────────────────────


@pytest.fixture
def seeded_rng() -> random.Random:
    """Provide a random source with a fixed seed."""
    return random.Random(1234)


@pytest.fixture
def plain_console() -> Iterator[PlainBackend]:
    """Route ``kernel.console.console`` to a PlainBackend for the test."""
    original = console_pkg._backend
    backend = PlainBackend()
    console_pkg._backend = backend
    try:
        yield backend
    finally:
        console_pkg._backend = original


@pytest.fixture
def metrics_factory() -> Callable[..., SortMetrics]:
    """Provide the make_metrics factory function."""
    return make_metrics


@pytest.fixture
def sort_input_factory() -> Callable[..., SortInput]:
    """Provide the make_sort_input factory function."""
    return make_sort_input


@pytest.fixture
def random_cases() -> list[list[int]]:
    """Provide 200 reproducible random lists with many duplicate values."""
    return random_lists(seed=20240229, count=200)
