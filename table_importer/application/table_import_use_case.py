from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ..config import ImporterConfig
from ..constants import Defaults, SourceFormats
from ..domain.entities.data_table import DataTable, TableInfo
from ..domain.services.delimiter_detector import guess_delimiter
from ..domain.services.header_parser import parse_field_headers
from ..domain.services.record_converter import (
    ValueConversionError,
    apply_conversion_plan,
)
from ..domain.services.type_inference import build_conversion_plan
from ..exceptions import (
    DataParseError,
    DataSourceNotFoundError,
    UnsupportedFormatError,
)
from .models import ImportOptions, TableBuffer, detect_source_format, source_name

if TYPE_CHECKING:
    from ..domain.entities.field_types import FieldHints, Record
    from .models import TableSource
    from .ports.repositories import SourceRepositoryPort
    from .ports.services import (
        BinaryTableReaderPort,
        DelimitedTextTokenizerPort,
        LoggerPort,
    )


@dataclass(slots=True)
class TableImportDependencies:
    logger: LoggerPort
    source_repository: SourceRepositoryPort
    tokenizer: DelimitedTextTokenizerPort
    binary_reader: BinaryTableReaderPort | None = None
    config: ImporterConfig | None = None


class TableImportUseCase:
    """Import a delimited text file or a binary table into a ``DataTable``.

    Text sources go through delimiter detection, tokenization, header hint
    parsing, type inference on the first record and a single conversion pass.
    Binary sources are handed to the binary table reader, whose values are
    already typed; no inference is done for them.

    Example:
        >>> use_case = TableImportUseCase(dependencies)
        >>> table = use_case.import_table("counties.csv")
        >>> table.info.delimiter
        ','
    """

    def __init__(self, dependencies: TableImportDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._source_repository = dependencies.source_repository
        self._tokenizer = dependencies.tokenizer
        self._binary_reader = dependencies.binary_reader
        self._config = dependencies.config or ImporterConfig()

    def import_table(
        self, source: TableSource, options: ImportOptions | None = None
    ) -> DataTable:
        options = options or ImportOptions()
        name = source_name(source)
        source_format = detect_source_format(source)
        self.logger.log_import_start(name, source_format)
        if source_format == SourceFormats.DELIMITED:
            return self._import_delim_source(source, name, options)
        return self._import_binary_source(source, name, source_format, options)

    def import_delim_table(
        self,
        content: str,
        options: ImportOptions | None = None,
        *,
        source: str = Defaults.BUFFER_NAME,
    ) -> DataTable:
        """Build a typed table from delimited text already held in memory.

        Raises:
            DataParseError: If the tokenizer fails or yields no records
        """
        options = options or ImportOptions()
        delimiter = guess_delimiter(content)
        self.logger.log_delimiter_detected(source, delimiter)
        tokenized = self._tokenizer.tokenize(content, delimiter)
        if not tokenized.records:
            raise DataParseError(f"No records found in {source}")

        repeated = _repeated_names(tokenized.header)
        if repeated:
            self.logger.warning(
                f"{source}: repeated field names {repeated}, keeping the last value"
            )
        hints: FieldHints = {}
        clean_names = parse_field_headers(
            tokenized.header, hints, warn=self.logger.warning
        )
        records = _rename_fields(tokenized.records, tokenized.header, clean_names)
        field_names = list(dict.fromkeys(clean_names))
        field_types = options.field_types or self._config.field_types
        if field_types:
            parse_field_headers(field_types, hints, warn=self.logger.warning)

        plan = build_conversion_plan(records[0], hints)
        self.logger.log_conversion_plan(source, plan)
        strict = (
            self._config.strict_numbers
            if options.strict_numbers is None
            else options.strict_numbers
        )
        report = apply_conversion_plan(records, plan, strict=strict)
        if report.has_failures():
            self.logger.log_conversion_failures(source, report)

        table = DataTable(
            records=records,
            info=TableInfo(
                source=source,
                source_format=SourceFormats.DELIMITED,
                delimiter=delimiter,
                conversion_plan=plan,
                conversion_report=report,
            ),
            field_names=field_names,
        )
        self.logger.log_table_loaded(source, len(table), table.field_count)
        return table

    def import_binary_table(
        self,
        data: bytes,
        source_format: str,
        options: ImportOptions | None = None,
        *,
        source: str = Defaults.BUFFER_NAME,
    ) -> DataTable:
        options = options or ImportOptions()
        reader = self._binary_reader
        if reader is None or not reader.supports(source_format):
            raise UnsupportedFormatError(
                f"No reader available for {source_format} tables: {source}"
            )
        encoding = options.encoding or self._config.binary_encoding
        records = reader.read(data, source_format, encoding=encoding)
        table = DataTable(
            records=records,
            info=TableInfo(source=source, source_format=source_format),
        )
        self.logger.log_table_loaded(source, len(table), table.field_count)
        return table

    def _import_delim_source(
        self, source: TableSource, name: str, options: ImportOptions
    ) -> DataTable:
        try:
            content = self._read_text(source)
            return self.import_delim_table(content, options, source=name)
        except (DataSourceNotFoundError, ValueConversionError):
            raise
        except Exception as exc:
            self.logger.debug(f"{name}: {exc}")
            raise DataParseError(f"Unable to import file: {name}") from exc

    def _import_binary_source(
        self,
        source: TableSource,
        name: str,
        source_format: str,
        options: ImportOptions,
    ) -> DataTable:
        if isinstance(source, TableBuffer):
            data = source.data
            if isinstance(data, str):
                raise DataParseError(f"Binary table {name} must be given as bytes")
        else:
            data = self._source_repository.read_bytes(Path(source))
        return self.import_binary_table(data, source_format, options, source=name)

    def _read_text(self, source: TableSource) -> str:
        if isinstance(source, TableBuffer):
            if isinstance(source.data, bytes):
                try:
                    return source.data.decode(self._config.text_encoding)
                except UnicodeDecodeError as exc:
                    raise DataParseError(
                        f"Encoding error reading {source.name}: {exc}"
                    ) from exc
            return source.data
        return self._source_repository.read_text(
            Path(source), self._config.text_encoding
        )


def _repeated_names(names: list[str]) -> list[str]:
    return sorted(name for name, count in Counter(names).items() if count > 1)


def _rename_fields(
    records: list[Record], header: list[str], clean_names: list[str]
) -> list[Record]:
    mapping = dict(zip(header, clean_names, strict=True))
    collisions = _repeated_names(list(mapping.values()))
    if collisions:
        raise DataParseError(
            f"Duplicate field names after removing type hints: {collisions}"
        )
    if all(raw == clean for raw, clean in mapping.items()):
        return records
    return [
        {mapping.get(key, key): value for key, value in record.items()}
        for record in records
    ]
