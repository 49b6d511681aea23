from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.table_import_use_case import (
    TableImportDependencies,
    TableImportUseCase,
)
from ..config import ImporterConfig
from .io.binary_table_reader import BinaryTableReader
from .io.delimited_text_tokenizer import PandasDelimitedTextTokenizer
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.source_repository import SourceRepository

if TYPE_CHECKING:
    from ..application.ports.repositories import SourceRepositoryPort
    from ..application.ports.services import (
        BinaryTableReaderPort,
        DelimitedTextTokenizerPort,
        LoggerPort,
    )


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: ImporterConfig | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console(stderr=True)
        self.use_null_logger = use_null_logger
        self.config = config or ImporterConfig()
        self._logger_instance: LoggerPort | None = None
        self._source_repository_instance: SourceRepositoryPort | None = None
        self._tokenizer_instance: DelimitedTextTokenizerPort | None = None
        self._binary_reader_instance: BinaryTableReaderPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_source_repository(self) -> SourceRepositoryPort:
        if self._source_repository_instance is None:
            self._source_repository_instance = SourceRepository()
        return self._source_repository_instance

    def create_tokenizer(self) -> DelimitedTextTokenizerPort:
        if self._tokenizer_instance is None:
            self._tokenizer_instance = PandasDelimitedTextTokenizer()
        return self._tokenizer_instance

    def create_binary_reader(self) -> BinaryTableReaderPort:
        if self._binary_reader_instance is None:
            self._binary_reader_instance = BinaryTableReader()
        return self._binary_reader_instance

    def create_table_import_use_case(self) -> TableImportUseCase:
        dependencies = TableImportDependencies(
            logger=self.create_logger(),
            source_repository=self.create_source_repository(),
            tokenizer=self.create_tokenizer(),
            binary_reader=self.create_binary_reader(),
            config=self.config,
        )
        return TableImportUseCase(dependencies)

    def reset(self) -> None:
        self._logger_instance = None
        self._source_repository_instance = None
        self._tokenizer_instance = None
        self._binary_reader_instance = None

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger

    def override_source_repository(
        self, source_repository: SourceRepositoryPort
    ) -> None:
        self._source_repository_instance = source_repository

    def override_tokenizer(self, tokenizer: DelimitedTextTokenizerPort) -> None:
        self._tokenizer_instance = tokenizer

    def override_binary_reader(self, binary_reader: BinaryTableReaderPort) -> None:
        self._binary_reader_instance = binary_reader


def create_default_container(
    verbose: int = 0, config: ImporterConfig | None = None
) -> DependencyContainer:
    return DependencyContainer(verbose=verbose, config=config)
