"""
kernel/config.py — Project paths, defaults and settings loading.

All path constants and default values live here. Optional overrides are
read from a YAML settings file (``bubblesort.yaml`` at the project root
unless another path is given).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger("bubblesort.config")

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

ROOT = Path(__file__).parent.parent.resolve()
CONFIG_FILE = ROOT / "bubblesort.yaml"

# ---------------------------------------------------------------------------
# Service settings
# ---------------------------------------------------------------------------

VERSION = "1.0.0"

# Benchmark mode defaults (``bubblesort --benchmark``)
DEFAULT_BENCHMARK_SIZE = 1000
DEFAULT_BENCHMARK_ITERATIONS = 10

# Benchmark run at the end of the demonstration
DEMO_BENCHMARK_SIZE = 100
DEMO_BENCHMARK_ITERATIONS = 10

DEMO_ARRAY = (64, 34, 25, 12, 22, 11, 90)
DEMO_DESC_ARRAY = (5, 1, 4, 2, 8)

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class ConfigError(ValueError):
    """Raised when the settings file cannot be used."""


@dataclass(frozen=True)
class Settings:
    """User-overridable settings."""

    benchmark_size: int = DEFAULT_BENCHMARK_SIZE
    benchmark_iterations: int = DEFAULT_BENCHMARK_ITERATIONS
    log_file: Path | None = None


def _non_negative_int(data: dict[str, Any], key: str, default: int, source: Path) -> int:
    value = data.get(key, default)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"{source}: benchmark.{key} must be a non-negative integer, got {value!r}"
        raise ConfigError(msg)
    return value


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a YAML file.

    A missing file yields the defaults. Unknown keys are ignored.

    Args:
        path: Settings file; ``CONFIG_FILE`` when omitted.

    Returns:
        The merged settings.

    Raises:
        ConfigError: The file is not valid YAML, is not a mapping, or holds
            an invalid benchmark default.
    """
    source = path if path is not None else CONFIG_FILE
    if not source.exists():
        logger.debug("No settings file at %s, using defaults", source)
        return Settings()

    try:
        data = yaml.safe_load(source.read_text()) or {}
    except yaml.YAMLError as exc:
        msg = f"{source}: invalid YAML: {exc}"
        raise ConfigError(msg) from exc

    if not isinstance(data, dict):
        msg = f"{source}: expected a mapping at top level"
        raise ConfigError(msg)

    benchmark = data.get("benchmark") or {}
    if not isinstance(benchmark, dict):
        msg = f"{source}: 'benchmark' must be a mapping"
        raise ConfigError(msg)

    log_file = data.get("log_file")
    settings = Settings(
        benchmark_size=_non_negative_int(benchmark, "size", DEFAULT_BENCHMARK_SIZE, source),
        benchmark_iterations=_non_negative_int(
            benchmark, "iterations", DEFAULT_BENCHMARK_ITERATIONS, source
        ),
        log_file=Path(log_file) if log_file else None,
    )
    logger.debug("Loaded settings from %s: %s", source, settings)
    return settings
