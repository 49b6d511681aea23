"""Bulk, in-place conversion of record values."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
import math
from typing import TYPE_CHECKING

from ..entities.conversion import ConversionFailure, ConversionReport, ConversionResult
from ..entities.field_types import FieldType, ValueKind, value_kind
from .numeric import parse_number_text

if TYPE_CHECKING:
    from ..entities.field_types import FieldValue, Record


class ValueConversionError(ValueError):
    def __init__(self, failure: ConversionFailure) -> None:
        super().__init__(failure.describe())
        self.failure = failure


def parse_number(value: FieldValue) -> ConversionResult:
    kind = value_kind(value)
    if kind is ValueKind.NUMBER:
        return ConversionResult(value=value, raw=value)
    if kind is ValueKind.TEXT:
        number = parse_number_text(value)  # type: ignore[arg-type]
        if number is not None:
            return ConversionResult(value=number, raw=value)
    return ConversionResult.failed(value)


def format_number(value: int | float) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def format_value(value: FieldValue) -> ConversionResult:
    kind = value_kind(value)
    if kind is ValueKind.TEXT:
        return ConversionResult(value=value, raw=value)
    if kind is ValueKind.NUMBER:
        return ConversionResult(value=format_number(value), raw=value)  # type: ignore[arg-type]
    if value is None:
        return ConversionResult(value="", raw=value)
    return ConversionResult(value=str(value), raw=value)


type ConversionStrategy = Callable[[FieldValue], ConversionResult]


def get_conversion_strategy(field_type: FieldType) -> ConversionStrategy:
    match field_type:
        case FieldType.NUMBER:
            return parse_number
        case FieldType.STRING:
            return format_value


def apply_conversion_plan(
    records: Sequence[Record],
    plan: Mapping[str, FieldType],
    *,
    strict: bool = False,
) -> ConversionReport:
    """Convert the planned fields of every record in place.

    An empty plan returns immediately without touching any record. Values that
    cannot be parsed as numbers are stored as ``nan`` and listed in the report,
    unless ``strict`` is set, in which case ``ValueConversionError`` is raised.
    """
    report = ConversionReport()
    if not plan:
        return report

    fields = list(plan)
    strategies = [get_conversion_strategy(plan[name]) for name in fields]
    for row, record in enumerate(records):
        for name, strategy in zip(fields, strategies, strict=True):
            result = strategy(record.get(name))
            if not result.converted:
                failure = ConversionFailure(
                    row=row, field=name, target=plan[name], raw=result.raw
                )
                if strict:
                    raise ValueConversionError(failure)
                report.failures.append(failure)
            else:
                report.values_converted += 1
            record[name] = result.value
        report.records_scanned += 1
    return report
