#!/usr/bin/env python3
"""
bubblesort CLI -- demonstration run and benchmark mode.

All sorting goes through wiring.py; this file only parses arguments,
configures output/logging and formats results.

Usage:
  bubblesort                                   # demonstration run
  bubblesort --benchmark [SIZE] [ITERATIONS]   # benchmark mode
  bubblesort --config PATH --plain --verbose
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import wiring
from domain.models import SortInput, SortOrder
from kernel.config import (
    DEMO_ARRAY,
    DEMO_BENCHMARK_ITERATIONS,
    DEMO_BENCHMARK_SIZE,
    DEMO_DESC_ARRAY,
    LOG_FORMAT,
    ConfigError,
    Settings,
    load_settings,
)
from kernel.console import configure, console

logger = logging.getLogger("bubblesort")

# ---------------------------------------------------------------------------
# CLI commands
# ---------------------------------------------------------------------------


def _parse_count(raw: str | None, default: int, label: str) -> int:
    """Parse a positional count, keeping ``default`` when it is not an integer."""
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        console.warning(f"Ignoring invalid {label} {raw!r}, using {default}")
        return default


def cmd_benchmark(args: argparse.Namespace, settings: Settings) -> None:
    """Run the benchmark with the requested size and iteration count."""
    size = _parse_count(args.size, settings.benchmark_size, "array size")
    iterations = _parse_count(args.iterations, settings.benchmark_iterations, "iteration count")

    console.section("Bubble Sort Benchmark Mode")
    console.kv({"Array Size": str(size), "Iterations": str(iterations)})

    result = wiring.run_benchmark(size, iterations)
    console.kv(
        {
            "Result": str(result),
            "Average": f"{result.average_time_ns / 1_000_000:.3f} ms",
        }
    )


def cmd_demo() -> None:
    """Walk through sorting, validation, edge cases and a small benchmark."""
    console.panel("Bubble Sort Standalone Implementation", title="bubblesort", style="green")

    # -- Standard sorting ----------------------------------------------------
    console.section("Standard Sorting Test")
    arr = list(DEMO_ARRAY)
    original = list(arr)
    response = wiring.execute_bubble_sort(SortInput(arr))
    in_place = "PASSED (same list)" if response.sorted_elements is arr else "FAILED (new list)"
    console.kv(
        {
            "Original array": str(original),
            "Sorted array": str(arr),
            "In-place check": in_place,
            "Metrics": str(response.metrics),
            "Is sorted": str(wiring.validate_sort(arr).is_sorted),
        }
    )

    # -- Boundary operations -------------------------------------------------
    console.section("Interface Alignment Tests")
    arr2 = list(DEMO_DESC_ARRAY)
    console.info(f"Executing sort (DESC) on: {arr2}")
    response = wiring.execute_bubble_sort(SortInput(arr2, SortOrder.DESC))
    validation = wiring.validate_sort(response.sorted_elements, SortOrder.DESC)
    console.kv(
        {
            "Sorted result": str(response.sorted_elements),
            "Metrics": str(response.metrics),
            "Validation (DESC check)": str(validation.is_sorted),
        }
    )

    # -- Edge cases ----------------------------------------------------------
    console.section("Edge Case Tests")
    edge_cases: list[tuple[str, list[int] | None]] = [
        ("missing", None),
        ("empty", []),
        ("single element", [42]),
    ]
    for i, (label, elements) in enumerate(edge_cases, start=1):
        console.step(i, len(edge_cases), f"Testing {label} array")
        response = wiring.execute_bubble_sort(SortInput(elements))
        console.success(f"PASSED (no crash, result: {response.sorted_elements})")

    # -- Descriptors ---------------------------------------------------------
    console.section("Additional Features")
    info = wiring.get_algorithm_info()
    console.kv(
        {
            "Algorithm": info.name,
            "Stable": str(info.stable),
            "Time complexity": info.time_complexity,
            "Space complexity": info.space_complexity,
            "Health check": json.dumps(wiring.health_check().to_dict()),
        }
    )

    # -- Benchmark -----------------------------------------------------------
    console.section("Default Benchmark")
    console.info(
        f"Running benchmark (Size: {DEMO_BENCHMARK_SIZE}, "
        f"Iterations: {DEMO_BENCHMARK_ITERATIONS})..."
    )
    result = wiring.run_benchmark(DEMO_BENCHMARK_SIZE, DEMO_BENCHMARK_ITERATIONS)
    console.info(f"Result: {result}")
    console.info("Tip: run with '--benchmark [size] [iterations]' for custom benchmarks.")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def _setup_logging(args: argparse.Namespace, settings: Settings) -> None:
    """Configure the log destination and level from flags and settings."""
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(filename=str(settings.log_file), format=LOG_FORMAT, level=level)
    else:
        logging.basicConfig(stream=sys.stderr, format=LOG_FORMAT, level=level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bubblesort",
        description="bubblesort -- in-place bubble sort with metrics and benchmarks",
    )
    parser.add_argument("--benchmark", action="store_true", help="Run benchmark mode")
    parser.add_argument("size", nargs="?", default=None, help="Benchmark array size")
    parser.add_argument("iterations", nargs="?", default=None, help="Benchmark iterations")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings file (default: bubblesort.yaml in the project root)",
    )
    parser.add_argument("--plain", action="store_true", help="Disable Rich output")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", action="store_true", help="Enable debug logging")
    verbosity.add_argument("--quiet", action="store_true", help="Only log errors")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    # -- Console configuration ----------------------------------------------
    configure(backend="plain" if args.plain else "auto")

    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        console.error(str(exc))
        sys.exit(2)

    # -- Logging configuration ----------------------------------------------
    _setup_logging(args, settings)
    logger.debug("Starting with %s (benchmark=%s)", settings, args.benchmark)

    if args.benchmark:
        cmd_benchmark(args, settings)
    else:
        if args.size is not None:
            console.warning("Size/iteration arguments are only used with --benchmark.")
        cmd_demo()


if __name__ == "__main__":
    main()
