from __future__ import annotations

import math
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from ...domain.entities.field_types import describe_plan

if TYPE_CHECKING:
    from rich.console import Console

    from ...domain.entities.data_table import DataTable

DELIMITER_LABELS = {"|": "pipe (|)", "\t": "tab (\\t)", ",": "comma (,)"}


def _format_cell(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    return str(value)


class TableSummaryPresenter:
    pass

    def __init__(self, console: Console, preview_rows: int = 5) -> None:
        super().__init__()
        self.console = console
        self.preview_rows = preview_rows

    def present(self, table: DataTable) -> None:
        info = table.info
        self.console.print(f"[bold]Source:[/bold] {escape(info.source)}")
        self.console.print(f"[bold]Format:[/bold] {info.source_format}")
        if info.delimiter is not None:
            label = DELIMITER_LABELS.get(info.delimiter, repr(info.delimiter))
            self.console.print(f"[bold]Delimiter:[/bold] {escape(label)}")
        self.console.print(
            f"[bold]Records:[/bold] {len(table):,} "
            + f"[bold]Fields:[/bold] {table.field_count}"
        )
        self.console.print(
            f"[bold]Conversions:[/bold] {escape(describe_plan(info.conversion_plan))}"
        )
        report = info.conversion_report
        if report.has_failures():
            self.console.print(
                f"[yellow]Unconverted values:[/yellow] {report.failure_count} "
                + "(stored as NaN)"
            )
        if self.preview_rows > 0 and table.records:
            self.console.print()
            self.console.print(self._build_preview(table))

    def _build_preview(self, table: DataTable) -> Table:
        shown = min(self.preview_rows, len(table))
        preview = Table(title=f"First {shown} of {len(table):,} records")
        for name in table.field_names:
            field_type = table.info.conversion_plan.get(name)
            header = f"{name} [dim]({field_type.value})[/dim]" if field_type else name
            preview.add_column(header)
        for record in table.records[:shown]:
            preview.add_row(
                *(escape(_format_cell(record.get(n))) for n in table.field_names)
            )
        return preview
