"""kernel.console._protocol -- ConsoleProtocol definition.

Pure standard-library typing.Protocol for the bubblesort terminal output.
No external dependencies allowed in this file.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleProtocol(Protocol):
    """bubblesort terminal output protocol.

    **General messages**::

        console.info("Array Size: 1000")
        console.success("In-place check passed")
        console.warning("Ignoring invalid size 'abc'")
        console.error("Invalid settings file")

    **Structured output**::

        console.section("Standard Sorting Test")
        console.panel("Bubble Sort", title="bubblesort")
        console.table(["Size", "Avg"], [["100", "1.2 ms"]], title="Benchmark")
        console.kv({"Original": "[3, 1, 2]", "Sorted": "[1, 2, 3]"})
        console.step(1, 3, "Testing empty array")
    """

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        """Informational message."""
        ...

    def success(self, message: str) -> None:
        """Success / positive-outcome message."""
        ...

    def warning(self, message: str) -> None:
        """Warning message."""
        ...

    def error(self, message: str) -> None:
        """Error message."""
        ...

    # -- Structured output --------------------------------------------------

    def section(self, title: str) -> None:
        """Display a section heading."""
        ...

    def panel(self, content: str, *, title: str = "", style: str = "") -> None:
        """Display *content* in a bordered panel."""
        ...

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        """Display a table with *headers* and *rows*."""
        ...

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        """Display key-value pairs."""
        ...

    def step(self, current: int, total: int, description: str) -> None:
        """Display a step indicator ``[current/total] description``."""
        ...

    def step_detail(self, message: str) -> None:
        """Display an indented detail line under the current step."""
        ...
