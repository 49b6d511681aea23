"""Unit tests for BinaryTableReader."""

from pathlib import Path

import pandas as pd
import pyreadstat
import pytest

from table_importer.exceptions import DataParseError
from table_importer.infrastructure.io import BinaryTableReader


class TestBinaryTableReader:
    @pytest.mark.parametrize("source_format", ["dbf", "sas7bdat", "xpt"])
    def test_supported_formats(self, source_format: str):
        assert BinaryTableReader().supports(source_format)

    @pytest.mark.parametrize("source_format", ["delimited", "shp", ""])
    def test_unsupported_formats(self, source_format: str):
        assert not BinaryTableReader().supports(source_format)

    def test_read_unsupported_format_raises(self):
        with pytest.raises(DataParseError, match="Unsupported binary format 'shp'"):
            BinaryTableReader().read(b"", "shp")

    def test_read_dbf(self, counties_dbf: bytes):
        # Act
        records = BinaryTableReader().read(counties_dbf, "dbf")

        # Assert
        assert len(records) == 2
        assert records[0]["ID"] == 1
        assert records[0]["NAME"] == "Ada"
        assert records[0]["AREA"] == 12.5
        assert records[1]["AREA"] is None

    def test_read_xport(self, tmp_path: Path):
        # Arrange
        frame = pd.DataFrame({"ID": [1.0, 2.0], "NAME": ["Ada", "Bob"]})
        xpt_file = tmp_path / "counties.xpt"
        pyreadstat.write_xport(frame, str(xpt_file))

        # Act
        records = BinaryTableReader().read(xpt_file.read_bytes(), "xpt")

        # Assert
        assert [r["ID"] for r in records] == [1.0, 2.0]
        assert [r["NAME"] for r in records] == ["Ada", "Bob"]

    def test_read_xport_missing_numbers_become_none(self, tmp_path: Path):
        frame = pd.DataFrame({"X": [1.5, float("nan")]})
        xpt_file = tmp_path / "x.xpt"
        pyreadstat.write_xport(frame, str(xpt_file))

        records = BinaryTableReader().read(xpt_file.read_bytes(), "xpt")

        assert records == [{"X": 1.5}, {"X": None}]

    def test_corrupt_data_raises(self):
        with pytest.raises(DataParseError, match="Failed to read sas7bdat table"):
            BinaryTableReader().read(b"not a sas file", "sas7bdat")
