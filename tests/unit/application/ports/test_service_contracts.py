"""Contract tests for port interfaces.

These tests verify that the adapters and test doubles adhere to the port
interfaces using runtime protocol checks, and that the use case reports its
progress through the logger port.
"""

from table_importer.application.models import TableBuffer
from table_importer.application.ports import (
    BinaryTableReaderPort,
    DelimitedTextTokenizerPort,
    LoggerPort,
    SourceRepositoryPort,
)
from table_importer.application.table_import_use_case import (
    TableImportDependencies,
    TableImportUseCase,
)
from table_importer.domain.entities import ConversionPlan, ConversionReport
from table_importer.infrastructure.io import (
    BinaryTableReader,
    PandasDelimitedTextTokenizer,
)
from table_importer.infrastructure.repositories import SourceRepository


class MockLogger:
    """Mock logger for testing protocol compliance."""

    def __init__(self):
        self.messages: list[tuple[str, object]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def debug(self, message: str) -> None:
        self.messages.append(("debug", message))

    def verbose(self, message: str) -> None:
        self.messages.append(("verbose", message))

    def log_import_start(self, source: str, source_format: str) -> None:
        self.messages.append(("log_import_start", (source, source_format)))

    def log_delimiter_detected(self, source: str, delimiter: str) -> None:
        self.messages.append(("log_delimiter_detected", delimiter))

    def log_table_loaded(
        self, source: str, row_count: int, field_count: int | None = None
    ) -> None:
        self.messages.append(("log_table_loaded", (row_count, field_count)))

    def log_conversion_plan(self, source: str, plan: ConversionPlan) -> None:
        self.messages.append(("log_conversion_plan", dict(plan)))

    def log_conversion_failures(self, source: str, report: ConversionReport) -> None:
        self.messages.append(("log_conversion_failures", report.failure_count))

    def log_final_stats(self) -> None:
        self.messages.append(("log_final_stats", None))


class TestPortCompliance:
    def test_mock_logger_satisfies_logger_port(self):
        assert isinstance(MockLogger(), LoggerPort)

    def test_tokenizer_satisfies_port(self):
        assert isinstance(PandasDelimitedTextTokenizer(), DelimitedTextTokenizerPort)

    def test_binary_reader_satisfies_port(self):
        assert isinstance(BinaryTableReader(), BinaryTableReaderPort)

    def test_source_repository_satisfies_port(self):
        assert isinstance(SourceRepository(), SourceRepositoryPort)

    def test_object_without_methods_does_not_satisfy_port(self):
        assert not isinstance(object(), LoggerPort)


class TestUseCaseLogging:
    def test_import_reports_each_step(self):
        # Arrange
        logger = MockLogger()
        use_case = TableImportUseCase(
            TableImportDependencies(
                logger=logger,
                source_repository=SourceRepository(),
                tokenizer=PandasDelimitedTextTokenizer(),
            )
        )

        # Act
        use_case.import_table(TableBuffer("t.csv", "ID,BAD:xyz\n1,x\nq,y\n"))

        # Assert
        kinds = [kind for kind, _payload in logger.messages]
        assert kinds == [
            "log_import_start",
            "log_delimiter_detected",
            "warning",
            "log_conversion_plan",
            "log_conversion_failures",
            "log_table_loaded",
        ]
        assert logger.messages[0] == ("log_import_start", ("t.csv", "delimited"))
        assert ("log_conversion_plan", {"ID": "number"}) in logger.messages
        assert ("log_table_loaded", (2, 2)) in logger.messages
