from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pandas as pd

from .conversion import ConversionReport

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .field_types import ConversionPlan, Record


def _empty_plan() -> ConversionPlan:
    return {}


@dataclass(slots=True)
class TableInfo:
    source: str
    source_format: str
    delimiter: str | None = None
    conversion_plan: ConversionPlan = field(default_factory=_empty_plan)
    conversion_report: ConversionReport = field(default_factory=ConversionReport)


@dataclass(slots=True)
class DataTable:
    records: list[Record]
    info: TableInfo
    field_names: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.field_names and self.records:
            self.field_names = list(self.records[0].keys())

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    @property
    def field_count(self) -> int:
        return len(self.field_names)

    def column(self, name: str) -> list[object]:
        if name not in self.field_names:
            raise KeyError(name)
        return [record.get(name) for record in self.records]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame.from_records(self.records, columns=self.field_names)

    def __repr__(self) -> str:
        return (
            f"DataTable(source={self.info.source!r}, fields={self.field_names}, "
            f"rows={len(self.records)})"
        )
