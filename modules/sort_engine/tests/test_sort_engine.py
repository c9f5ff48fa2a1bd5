"""Tests for the bubble sort engine."""

from __future__ import annotations

from collections import Counter

import pytest

from domain.models import AlgorithmInfo, SortOrder
from modules.sort_engine.core import algorithm_info, bubble_sort
from modules.validator.core import is_sorted


class TestOrdering:
    """Results are ordered according to the requested direction."""

    def test_ascending_example(self) -> None:
        arr = [64, 34, 25, 12, 22, 11, 90]
        bubble_sort(arr, SortOrder.ASC)
        assert arr == [11, 12, 22, 25, 34, 64, 90]

    def test_descending_example(self) -> None:
        arr = [5, 1, 4, 2, 8]
        bubble_sort(arr, SortOrder.DESC)
        assert arr == [8, 5, 4, 2, 1]

    def test_default_order_is_ascending(self) -> None:
        arr = [3, -1, 2]
        bubble_sort(arr)
        assert arr == [-1, 2, 3]

    @pytest.mark.parametrize("order", ["DESC", "desc", " Descending "])
    def test_descending_strings(self, order: str) -> None:
        arr = [1, 3, 2]
        bubble_sort(arr, order)
        assert arr == [3, 2, 1]

    @pytest.mark.parametrize("order", [None, "", "sideways", 42, "ASC"])
    def test_unrecognised_order_sorts_ascending(self, order: object) -> None:
        arr = [2, 3, 1]
        bubble_sort(arr, order)
        assert arr == [1, 2, 3]

    def test_negative_and_extreme_values(self) -> None:
        arr = [2**31 - 1, 0, -(2**31), -5, 5]
        bubble_sort(arr)
        assert arr == [-(2**31), -5, 0, 5, 2**31 - 1]

    def test_random_lists_end_up_sorted(self, random_cases: list[list[int]]) -> None:
        for order in SortOrder:
            for case in random_cases:
                arr = list(case)
                bubble_sort(arr, order)
                assert is_sorted(arr, order), (case, order)

    def test_permutation_is_preserved(self, random_cases: list[list[int]]) -> None:
        for case in random_cases:
            arr = list(case)
            bubble_sort(arr, SortOrder.DESC)
            assert len(arr) == len(case)
            assert Counter(arr) == Counter(case)


class TestInPlace:
    """The caller's list object is the one that gets sorted."""

    def test_same_list_object(self) -> None:
        arr = [3, 2, 1]
        ref = arr
        bubble_sort(arr)
        assert arr is ref
        assert ref == [1, 2, 3]


class TestStability:
    """Equal keys keep their relative order."""

    def test_equal_values_keep_identity_order(self) -> None:
        # Large ints are distinct objects; identity reveals their order.
        a, b, c = int("1000000001"), int("1000000001"), int("1000000001")
        arr = [a, 5, b, -3, c]
        bubble_sort(arr)
        equal = [x for x in arr if x == 1000000001]
        assert [id(x) for x in equal] == [id(a), id(b), id(c)]

    def test_equal_neighbours_are_never_swapped(self) -> None:
        arr = [7, 7, 7, 7]
        metrics = bubble_sort(arr, SortOrder.DESC)
        assert metrics.swap_count == 0
        assert metrics.comparison_count == 3


class TestMetrics:
    """Comparison and swap counts follow the algorithm exactly."""

    @pytest.mark.parametrize("n", [2, 3, 10, 50])
    def test_best_case_sorted_input(self, n: int) -> None:
        arr = list(range(n))
        metrics = bubble_sort(arr)
        assert metrics.comparison_count == n - 1
        assert metrics.swap_count == 0

    @pytest.mark.parametrize("n", [2, 3, 10, 50])
    def test_worst_case_reversed_input(self, n: int) -> None:
        arr = list(range(n, 0, -1))
        metrics = bubble_sort(arr)
        assert metrics.comparison_count == n * (n - 1) // 2
        assert metrics.swap_count == n * (n - 1) // 2

    def test_worst_case_descending_on_ascending_input(self) -> None:
        arr = list(range(6))
        metrics = bubble_sort(arr, SortOrder.DESC)
        assert metrics.swap_count == 15
        assert arr == [5, 4, 3, 2, 1, 0]

    def test_early_termination_after_one_swap(self) -> None:
        # Pass 1: 3 comparisons, 1 swap. Pass 2: 2 comparisons, no swap -> stop.
        metrics = bubble_sort([1, 3, 2, 4])
        assert metrics.comparison_count == 5
        assert metrics.swap_count == 1

    def test_elapsed_time_is_non_negative(self) -> None:
        metrics = bubble_sort([5, 4, 3, 2, 1])
        assert metrics.execution_time_ns >= 0
        assert metrics.elapsed_seconds == metrics.execution_time_ns / 1_000_000_000

    def test_idempotent(self) -> None:
        arr = [9, -2, 4, 4, 0]
        bubble_sort(arr, SortOrder.DESC)
        snapshot = list(arr)
        metrics = bubble_sort(arr, SortOrder.DESC)
        assert arr == snapshot
        assert metrics.swap_count == 0
        assert metrics.comparison_count == len(arr) - 1


class TestEdgeCases:
    """Degenerate inputs do no work and never raise."""

    @pytest.mark.parametrize("arr", [[], [42]])
    def test_trivial_lists(self, arr: list[int]) -> None:
        before = list(arr)
        metrics = bubble_sort(arr)
        assert arr == before
        assert metrics.comparison_count == 0
        assert metrics.swap_count == 0

    def test_none(self) -> None:
        metrics = bubble_sort(None)
        assert metrics.comparison_count == 0
        assert metrics.swap_count == 0


class TestAlgorithmInfo:
    def test_fixed_descriptor(self) -> None:
        info = algorithm_info()
        assert info == AlgorithmInfo(
            name="Bubble Sort",
            stable=True,
            time_complexity="O(n²)",
            space_complexity="O(1)",
        )

    def test_returns_same_value_every_call(self) -> None:
        assert algorithm_info() == algorithm_info()
