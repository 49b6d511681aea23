from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.entities.conversion import ConversionReport
    from ...domain.entities.field_types import ConversionPlan, Record
    from ..models import TokenizedText


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_import_start(self, source: str, source_format: str) -> None: ...

    def log_delimiter_detected(self, source: str, delimiter: str) -> None: ...

    def log_table_loaded(
        self, source: str, row_count: int, field_count: int | None = None
    ) -> None: ...

    def log_conversion_plan(self, source: str, plan: ConversionPlan) -> None: ...

    def log_conversion_failures(self, source: str, report: ConversionReport) -> None: ...

    def log_final_stats(self) -> None: ...


@runtime_checkable
class DelimitedTextTokenizerPort(Protocol):
    pass

    def tokenize(self, content: str, delimiter: str) -> TokenizedText: ...


@runtime_checkable
class BinaryTableReaderPort(Protocol):
    pass

    def supports(self, source_format: str) -> bool: ...

    def read(
        self, data: bytes, source_format: str, *, encoding: str | None = None
    ) -> list[Record]: ...
