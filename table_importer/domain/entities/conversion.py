from __future__ import annotations

from dataclasses import dataclass, field
import math

from .field_types import FieldType, FieldValue


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of converting one value.

    ``converted`` is False when the value could not be parsed; ``value`` then
    holds ``nan`` so callers that ignore the flag keep the lenient behavior.
    """

    value: FieldValue
    converted: bool = True
    raw: FieldValue = None

    @classmethod
    def failed(cls, raw: FieldValue) -> ConversionResult:
        return cls(value=math.nan, converted=False, raw=raw)


@dataclass(frozen=True, slots=True)
class ConversionFailure:
    row: int
    field: str
    target: FieldType
    raw: FieldValue

    def describe(self) -> str:
        return (
            f"row {self.row}, field {self.field!r}: "
            f"cannot convert {self.raw!r} to {self.target.value}"
        )


def _empty_failures() -> list[ConversionFailure]:
    return []


@dataclass(slots=True)
class ConversionReport:
    records_scanned: int = 0
    values_converted: int = 0
    failures: list[ConversionFailure] = field(default_factory=_empty_failures)

    @property
    def failure_count(self) -> int:
        return len(self.failures)

    def has_failures(self) -> bool:
        return bool(self.failures)

    def failures_for(self, field_name: str) -> list[ConversionFailure]:
        return [f for f in self.failures if f.field == field_name]
