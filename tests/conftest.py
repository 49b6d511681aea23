import struct

import pytest

ENV_VARS = (
    "TABLE_IMPORTER_TEXT_ENCODING",
    "TABLE_IMPORTER_BINARY_ENCODING",
    "TABLE_IMPORTER_STRICT_NUMBERS",
    "TABLE_IMPORTER_PREVIEW_ROWS",
)

type DbfField = tuple[str, str, int, int]


@pytest.fixture(autouse=True)
def _isolated_importer_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    """Keep developer settings out of the tests.

    Environment overrides are cleared and the working directory is moved to an
    empty folder so that no ./table_importer.toml is picked up.
    """
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))


def build_dbf(fields: list[DbfField], rows: list[tuple[object, ...]]) -> bytes:
    """Assemble a minimal dBase III table (no memo fields)."""
    header_length = 32 + 32 * len(fields) + 1
    record_length = 1 + sum(length for _name, _type, length, _dec in fields)
    header = struct.pack(
        "<BBBBLHH20x", 0x03, 124, 1, 1, len(rows), header_length, record_length
    )
    descriptors = b"".join(
        struct.pack(
            "<11sc4xBB14x", name.encode("ascii"), kind.encode("ascii"), length, dec
        )
        for name, kind, length, dec in fields
    )
    body = b""
    for row in rows:
        body += b" "
        for (_name, kind, length, _dec), value in zip(fields, row, strict=True):
            text = "" if value is None else str(value)
            cell = text.rjust(length) if kind == "N" else text.ljust(length)
            body += cell.encode("ascii")[:length]
    return header + descriptors + b"\r" + body + b"\x1a"


@pytest.fixture
def counties_dbf() -> bytes:
    return build_dbf(
        [("ID", "N", 5, 0), ("NAME", "C", 10, 0), ("AREA", "N", 8, 2)],
        [(1, "Ada", "12.50"), (2, "Bob", None)],
    )
