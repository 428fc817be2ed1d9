"""
Output formatters for the Vercel CLI.

Renders API payloads as aligned text tables, labeled detail views or raw JSON.
Table and detail output go through Rich so values can carry colors; JSON output
is written verbatim to stdout.
"""

import json
import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Union

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.text import Text

from vercel_cli.cli.display import NOT_AVAILABLE

console = Console()
err_console = Console(stderr=True)

MAX_COLUMN_WIDTH = 50
COLUMN_SEPARATOR = "  "
DETAIL_LABEL_WIDTH = 17

Cell = Union[str, Text]
CellFormatter = Callable[[Any, Mapping[str, Any]], Cell]


@dataclass(frozen=True)
class Column:
    """One table column: the record field it shows, its header and an optional formatter.

    The formatter receives the field value (``None`` when absent) and the whole
    record, and returns the display string, optionally styled as a Rich ``Text``.
    """

    key: str
    label: str
    format: Optional[CellFormatter] = None

    def render(self, record: Mapping[str, Any]) -> Text:
        value = record.get(self.key) if isinstance(record, Mapping) else None
        if self.format is not None:
            value = self.format(value, record)
        if isinstance(value, Text):
            return value.copy()
        return Text("" if value is None else str(value))


def compute_column_widths(
    records: Sequence[Mapping[str, Any]], columns: Sequence[Column]
) -> List[int]:
    """Width of each column: its widest header or cell, capped at MAX_COLUMN_WIDTH."""
    widths = []
    for column in columns:
        width = len(column.label)
        for record in records:
            width = max(width, len(column.render(record).plain))
        widths.append(min(width, MAX_COLUMN_WIDTH))
    return widths


def _fit(cell: Text, width: int) -> Text:
    overflow = len(cell.plain) - width
    if overflow > 0:
        cell.right_crop(overflow)
    else:
        cell.pad_right(-overflow)
    return cell


class OutputFormatter:
    """Renders command results as a table, a detail view or JSON."""

    def __init__(
        self,
        format_type: str = "human",
        quiet: bool = False,
        out: Optional[Console] = None,
    ):
        self.format_type = format_type
        self.quiet = quiet
        self.console = out or console

    @property
    def is_json(self) -> bool:
        return self.format_type == "json"

    def _write_line(self, text: str = "") -> None:
        sys.stdout.write(f"{text}\n")

    def _print(self, renderable: Union[str, Text] = "") -> None:
        if self.quiet:
            return
        self.console.print(renderable, soft_wrap=True, highlight=False, markup=False)

    def output_json(self, data: Any) -> None:
        """Write the payload as two-space indented JSON, untouched."""
        self._write_line(json.dumps(data, indent=2, ensure_ascii=False, default=str))

    def title(self, text: str) -> None:
        self._print(Text(f"\n{text}\n", style="bold"))

    def notice(self, text: str, style: str = "yellow") -> None:
        self._print(Text(text, style=style))

    def line(self, text: Union[str, Text] = "") -> None:
        self._print(text)

    def success(self, message: str) -> None:
        self._print(Text.assemble(("✓", "green"), " ", message))

    def error(self, message: str) -> None:
        """Errors are shown on stderr even in quiet mode."""
        err_console.print(
            Text.assemble(("✗", "red"), " ", message), soft_wrap=True, highlight=False
        )

    def table(
        self, records: Sequence[Mapping[str, Any]], columns: Sequence[Column]
    ) -> None:
        """Print records as an aligned table followed by a result count."""
        if not records:
            self.notice("No results found.")
            return

        widths = compute_column_widths(records, columns)

        header = COLUMN_SEPARATOR.join(
            column.label.ljust(width) for column, width in zip(columns, widths)
        )
        self._print(Text(header, style="bold cyan"))
        self._print(Text("─" * len(header), style="dim"))

        separator = Text(COLUMN_SEPARATOR)
        for record in records:
            cells = [
                _fit(column.render(record), width)
                for column, width in zip(columns, widths)
            ]
            self._print(separator.join(cells))

        self._print(Text(f"\n{len(records)} result(s)", style="dim"))

    def field(
        self,
        label: str,
        value: Any,
        style: Optional[str] = None,
        indent: int = 0,
    ) -> None:
        """Print one ``Label:  value`` line of a detail view; blanks show as N/A."""
        if value is None or value == "":
            value = NOT_AVAILABLE

        line = Text(f"{' ' * indent}{label}:".ljust(DETAIL_LABEL_WIDTH) + " ")
        if isinstance(value, Text):
            line.append(value)
        else:
            line.append(str(value), style=style)
        self._print(line)

    def section(self, title: str) -> None:
        self._print(Text(f"\n{title}:"))

    def bullets(
        self, title: str, items: Iterable[Any], style: Optional[str] = None
    ) -> None:
        """Print a titled bullet list; nothing at all when there are no items."""
        items = list(items or [])
        if not items:
            return

        self.section(title)
        for item in items:
            self._print(Text.assemble("  • ", (str(item), style or "")))


def create_progress() -> Progress:
    """Create a transient spinner for requests in flight."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=err_console,
        transient=True,
    )
