from collections.abc import Callable
from pathlib import Path
import tempfile

from dbfread import DBF
import pandas as pd
import pyreadstat

from ...constants import SourceFormats
from ...domain.entities.field_types import Record
from ...exceptions import DataParseError

type TableFileReader = Callable[[Path, str | None], list[Record]]


def _read_dbf(path: Path, encoding: str | None) -> list[Record]:
    table = DBF(
        str(path),
        encoding=encoding,
        load=True,
        ignore_missing_memofile=True,
    )
    return [dict(record) for record in table.records]


def _frame_to_records(frame: pd.DataFrame) -> list[Record]:
    frame = frame.astype(object).where(frame.notna(), None)
    return [
        {str(key): value for key, value in row.items()}
        for row in frame.to_dict(orient="records")
    ]


def _read_sas7bdat(path: Path, encoding: str | None) -> list[Record]:
    if encoding:
        frame, _meta = pyreadstat.read_sas7bdat(str(path), encoding=encoding)
    else:
        frame, _meta = pyreadstat.read_sas7bdat(str(path))
    return _frame_to_records(frame)


def _read_xport(path: Path, encoding: str | None) -> list[Record]:
    if encoding:
        frame, _meta = pyreadstat.read_xport(str(path), encoding=encoding)
    else:
        frame, _meta = pyreadstat.read_xport(str(path))
    return _frame_to_records(frame)


class BinaryTableReader:
    """Read binary table formats whose values are already typed.

    dBase tables go through dbfread, SAS datasets and transport files through
    pyreadstat. Both libraries read from a path, so buffers are staged in a
    temporary directory.
    """

    def __init__(self) -> None:
        super().__init__()
        self._readers: dict[str, TableFileReader] = {
            SourceFormats.DBF: _read_dbf,
            SourceFormats.SAS7BDAT: _read_sas7bdat,
            SourceFormats.XPORT: _read_xport,
        }

    def supports(self, source_format: str) -> bool:
        return source_format in self._readers

    def read(
        self, data: bytes, source_format: str, *, encoding: str | None = None
    ) -> list[Record]:
        reader = self._readers.get(source_format)
        if reader is None:
            supported = ", ".join(sorted(self._readers))
            raise DataParseError(
                f"Unsupported binary format '{source_format}'. Supported: {supported}"
            )
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / f"table.{source_format}"
            path.write_bytes(data)
            try:
                return reader(path, encoding)
            except Exception as e:
                raise DataParseError(
                    f"Failed to read {source_format} table: {e}"
                ) from e
