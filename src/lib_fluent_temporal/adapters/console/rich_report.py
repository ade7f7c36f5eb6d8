"""Rich-powered rendering of assertion showcase results.

Purpose
-------
Print the outcome of :func:`lib_fluent_temporal.run_demo` as a table so the
failure messages can be read side by side with the expectations.

Contents
--------
* :data:`_STYLE_MAP` – status-to-style mapping.
* :class:`RichReportAdapter` – adapter used by the ``demo`` command.

System Role
-----------
Human-facing sink of the CLI; colour can be disabled for plain terminals and
captured test output.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Mapping

from rich.console import Console
from rich.table import Table

from lib_fluent_temporal.lib_fluent_temporal import DemoResult

_STYLE_MAP: Mapping[bool, str] = {
    True: "green",
    False: "bold red",
}


class RichReportAdapter:
    """Render demo results with Rich."""

    def __init__(self, *, console: Console | None = None, no_color: bool = False) -> None:
        if console is not None:
            self._console = console
        else:
            self._console = Console(no_color=no_color, highlight=False)
        self._no_color = no_color

    def emit(self, results: Iterable[DemoResult], *, title: str) -> int:
        """Print ``results`` as a table and return the number of failures.

        Examples
        --------
        >>> from io import StringIO
        >>> buffer = StringIO()
        >>> adapter = RichReportAdapter(console=Console(file=buffer, width=120, no_color=True))
        >>> adapter.emit([DemoResult("x has day 1", True)], title="demo")
        0
        >>> "x has day 1" in buffer.getvalue()
        True
        """
        table = Table(title=title, show_lines=False)
        table.add_column("expectation")
        table.add_column("outcome")
        table.add_column("message", overflow="fold")
        failures = 0
        for result in results:
            style = None if self._no_color else _STYLE_MAP[result.passed]
            if not result.passed:
                failures += 1
            table.add_row(result.description, "passed" if result.passed else "failed", result.message, style=style)
        self._console.print(table)
        return failures


__all__ = ["RichReportAdapter"]
