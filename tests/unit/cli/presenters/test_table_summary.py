"""Unit tests for TableSummaryPresenter class."""

from io import StringIO
import math

import pytest
from rich.console import Console

from table_importer.cli.presenters import TableSummaryPresenter
from table_importer.domain.entities import (
    ConversionFailure,
    ConversionReport,
    DataTable,
    FieldType,
    TableInfo,
)


class TestTableSummaryPresenter:
    @pytest.fixture
    def console(self):
        return Console(file=StringIO(), width=120)

    @pytest.fixture
    def table(self):
        report = ConversionReport(records_scanned=3, values_converted=2)
        report.failures.append(
            ConversionFailure(row=2, field="POP", target=FieldType.NUMBER, raw="n/a")
        )
        return DataTable(
            records=[
                {"FIPS": "001", "POP": 1234, "NAME": "Ada"},
                {"FIPS": "002", "POP": 56, "NAME": "Bob"},
                {"FIPS": "003", "POP": math.nan, "NAME": "Cy"},
            ],
            info=TableInfo(
                source="counties.csv",
                source_format="delimited",
                delimiter=",",
                conversion_plan={"POP": FieldType.NUMBER},
                conversion_report=report,
            ),
        )

    def test_presenter_initialization(self, console: Console):
        presenter = TableSummaryPresenter(console)

        assert presenter.console is console
        assert presenter.preview_rows == 5

    def test_present_summary(self, console: Console, table: DataTable):
        TableSummaryPresenter(console).present(table)

        output = console.file.getvalue()  # type: ignore[attr-defined]
        assert "counties.csv" in output
        assert "comma (,)" in output
        assert "Records: 3" in output
        assert "Fields: 3" in output
        assert "POP:number" in output
        assert "Unconverted values: 1" in output

    def test_preview_table(self, console: Console, table: DataTable):
        TableSummaryPresenter(console, preview_rows=2).present(table)

        output = console.file.getvalue()  # type: ignore[attr-defined]
        assert "First 2 of 3 records" in output
        assert "Ada" in output
        assert "Bob" in output
        assert "Cy" not in output

    def test_nan_is_shown(self, console: Console, table: DataTable):
        TableSummaryPresenter(console).present(table)

        assert "NaN" in console.file.getvalue()  # type: ignore[attr-defined]

    def test_no_preview(self, console: Console, table: DataTable):
        TableSummaryPresenter(console, preview_rows=0).present(table)

        output = console.file.getvalue()  # type: ignore[attr-defined]
        assert "First" not in output
        assert "Ada" not in output

    def test_binary_table_has_no_delimiter_line(self, console: Console):
        table = DataTable(
            records=[{"ID": 1}],
            info=TableInfo(source="t.dbf", source_format="dbf"),
        )

        TableSummaryPresenter(console).present(table)

        output = console.file.getvalue()  # type: ignore[attr-defined]
        assert "Delimiter" not in output
        assert "no conversion" in output
        assert "Unconverted" not in output
