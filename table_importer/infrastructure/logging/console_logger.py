from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort
from ...domain.entities.field_types import describe_plan

if TYPE_CHECKING:
    from ...domain.entities.conversion import ConversionReport
    from ...domain.entities.field_types import ConversionPlan

MAX_FAILURES_SHOWN = 10


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    source: str = ""
    source_format: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return {
        "sources_imported": 0,
        "records_loaded": 0,
        "conversion_failures": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console(stderr=True)
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{escape(message)}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{escape(message)}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{escape(message)}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {escape(message)}")

    @override
    def log_import_start(self, source: str, source_format: str) -> None:
        self._context = LogContext(source=source, source_format=source_format)
        self.verbose(f"Importing {source} ({source_format})")

    @override
    def log_delimiter_detected(self, source: str, delimiter: str) -> None:
        self.debug(f"Detected delimiter {delimiter!r} in {source}")

    @override
    def log_table_loaded(
        self, source: str, row_count: int, field_count: int | None = None
    ) -> None:
        self._stats["sources_imported"] += 1
        self._stats["records_loaded"] += row_count
        msg = f"Loaded {row_count:,} records from {source}"
        if field_count is not None and self.verbosity >= LogLevel.DEBUG:
            msg += f" ({field_count} fields)"
        if self._context is not None and self._context.source == source:
            msg += f" in {self._context.elapsed_ms():.1f} ms"
        self.verbose(msg)

    @override
    def log_conversion_plan(self, source: str, plan: ConversionPlan) -> None:
        self.debug(f"Conversion plan for {source}: {describe_plan(plan)}")

    @override
    def log_conversion_failures(self, source: str, report: ConversionReport) -> None:
        self._stats["conversion_failures"] += report.failure_count
        self.warning(
            f"{source}: {report.failure_count} value(s) could not be converted "
            + "and were stored as NaN"
        )
        for failure in report.failures[:MAX_FAILURES_SHOWN]:
            self.verbose(f"  {failure.describe()}")
        remaining = report.failure_count - MAX_FAILURES_SHOWN
        if remaining > 0:
            self.verbose(f"  {remaining} more failure(s) not shown")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Import Statistics:[/dim]")
            self.console.print(
                f"[dim]  Sources imported: {self._stats['sources_imported']}[/dim]"
            )
            self.console.print(
                f"[dim]  Records loaded: {self._stats['records_loaded']:,}[/dim]"
            )
            if self._stats["conversion_failures"] > 0:
                self.console.print(
                    "[dim yellow]  Conversion failures: "
                    + f"{self._stats['conversion_failures']}[/dim yellow]"
                )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        if self._context.source:
            return escape(f"[{self._context.source}] ")
        return ""
