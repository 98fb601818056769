"""Output formatters for the ``prices`` command."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Mapping, Sequence, TextIO

from rich.box import SIMPLE
from rich.console import Console
from rich.table import Table

Row = Mapping[str, object]


class OutputFormatter:
    """Protocol-like base class for CLI output formatters."""

    def render(self, rows: Sequence[Row], *, stream: TextIO, columns: Sequence[str]) -> None:
        """Render ``columns`` of each row to the target stream."""

        raise NotImplementedError


@dataclass(slots=True)
class TableFormatter(OutputFormatter):
    """Render prices as a Rich table, tinting each colour cell with its own colour."""

    no_color: bool = False

    def render(self, rows: Sequence[Row], *, stream: TextIO, columns: Sequence[str]) -> None:
        console = Console(
            file=stream,
            color_system=None if self.no_color else "auto",
            no_color=self.no_color,
        )

        table = Table(box=SIMPLE, show_lines=False)
        header_style = "" if self.no_color else "bold"
        for column in columns:
            table.add_column(column, header_style=header_style)

        if not rows:
            console.print(table)
            console.print("No data available.")
            return

        for row in rows:
            table.add_row(*(self._format_cell(column, row.get(column)) for column in columns))
        console.print(table)

    def _format_cell(self, column: str, value: object) -> str:
        if value is None:
            return "-"
        if column == "color" and not self.no_color:
            return f"[{value}]{value}[/]"
        return str(value)


class JSONLFormatter(OutputFormatter):
    """One JSON object per price."""

    def render(self, rows: Sequence[Row], *, stream: TextIO, columns: Sequence[str]) -> None:
        for row in rows:
            json.dump({column: row.get(column) for column in columns}, stream, default=str)
            stream.write("\n")
        stream.flush()


def create_formatter(name: str, *, no_color: bool = False) -> OutputFormatter:
    """Instantiate a formatter by name."""

    normalized = name.strip().lower()
    if normalized == "table":
        return TableFormatter(no_color=no_color)
    if normalized == "jsonl":
        return JSONLFormatter()
    msg = f"Unsupported format '{name}'. Available formats: table, jsonl."
    raise ValueError(msg)


__all__ = ["OutputFormatter", "TableFormatter", "JSONLFormatter", "create_formatter"]
