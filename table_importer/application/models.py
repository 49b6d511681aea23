from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath
from typing import TYPE_CHECKING

from ..constants import SourceFormats

if TYPE_CHECKING:
    from pathlib import Path

    from ..domain.entities.field_types import Record


def _empty_records() -> list[Record]:
    return []


@dataclass(frozen=True, slots=True)
class TableBuffer:
    """In-memory table source; ``name`` identifies it in messages and picks the format."""

    name: str
    data: bytes | str


type TableSource = str | Path | TableBuffer


@dataclass(frozen=True, slots=True)
class ImportOptions:
    encoding: str | None = None
    field_types: tuple[str, ...] = ()
    strict_numbers: bool | None = None


@dataclass(slots=True)
class TokenizedText:
    header: list[str]
    records: list[Record] = field(default_factory=_empty_records)


def source_name(source: TableSource) -> str:
    if isinstance(source, TableBuffer):
        return source.name
    return str(source)


def detect_source_format(source: TableSource) -> str:
    suffix = PurePath(source_name(source)).suffix.lower()
    return SourceFormats.BINARY_EXTENSIONS.get(suffix, SourceFormats.DELIMITED)
