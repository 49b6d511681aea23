from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from ...domain.entities.conversion import ConversionReport
    from ...domain.entities.field_types import ConversionPlan


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_import_start(self, source: str, source_format: str) -> None:
        return None

    @override
    def log_delimiter_detected(self, source: str, delimiter: str) -> None:
        return None

    @override
    def log_table_loaded(
        self, source: str, row_count: int, field_count: int | None = None
    ) -> None:
        return None

    @override
    def log_conversion_plan(self, source: str, plan: ConversionPlan) -> None:
        return None

    @override
    def log_conversion_failures(self, source: str, report: ConversionReport) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
