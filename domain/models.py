"""Core data types for bubblesort.

All types are frozen dataclasses with complete type annotations.
This module has ZERO imports from outside the Python standard library.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

_DESC_ALIASES = frozenset({"desc", "descending"})


class SortOrder(Enum):
    """Direction of a sort."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: object) -> SortOrder:
        """Map any value to an order, defaulting to ``ASC``.

        Only ``"desc"``/``"descending"`` (any case, surrounding whitespace
        ignored) select ``DESC``. ``None`` and unrecognised values fall back
        to ``ASC`` instead of raising.
        """
        if isinstance(value, SortOrder):
            return value
        if isinstance(value, str) and value.strip().casefold() in _DESC_ALIASES:
            return cls.DESC
        return cls.ASC


class HealthStatus(Enum):
    """Service health state. ``UP`` means operational."""

    UP = "UP"


# ---------------------------------------------------------------------------
# Core value objects
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SortMetrics:
    """Performance statistics of a single sort invocation."""

    comparison_count: int
    swap_count: int
    execution_time_ns: int

    @property
    def elapsed_seconds(self) -> float:
        return self.execution_time_ns / 1_000_000_000

    def __str__(self) -> str:
        return (
            f"SortMetrics(comparisons={self.comparison_count}, "
            f"swaps={self.swap_count}, time={self.execution_time_ns} ns)"
        )


@dataclass(frozen=True)
class BenchmarkResult:
    """Average sort time over a number of random arrays of one size.

    ``array_size`` is the size that was requested. ``iterations`` is the
    number of sorts actually performed, 0 when the requested count was not
    positive.
    """

    array_size: int
    average_time_ns: float
    iterations: int = 0

    def __str__(self) -> str:
        return (
            f"BenchmarkResult(array_size={self.array_size}, "
            f"average_time={self.average_time_ns:.2f} ns)"
        )


@dataclass(frozen=True)
class AlgorithmInfo:
    """Static description of the sorting algorithm."""

    name: str = "Bubble Sort"
    stable: bool = True
    time_complexity: str = "O(n²)"
    space_complexity: str = "O(1)"


@dataclass(frozen=True)
class HealthReport:
    """Result of a service health check."""

    status: HealthStatus
    version: str

    def to_dict(self) -> dict[str, str]:
        return {"status": self.status.value, "version": self.version}


# ---------------------------------------------------------------------------
# Boundary types (used by wiring.py and the CLI only)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SortInput:
    """Elements to sort plus the requested order.

    The list itself stays mutable; it is sorted in place.
    """

    elements: list[int] | None
    order: SortOrder = SortOrder.ASC


@dataclass(frozen=True)
class SortResponse:
    """Metrics of a sort together with the (same) sorted list."""

    metrics: SortMetrics
    sorted_elements: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking whether a list is sorted."""

    sorted_elements: list[int]
    is_sorted: bool
    timestamp: str
