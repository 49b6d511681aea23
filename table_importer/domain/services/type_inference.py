"""Per-field conversion planning from type hints and a sample record."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..entities.field_types import FieldType, ValueKind, value_kind
from .header_parser import parse_field_headers
from .numeric import string_is_numeric
from .record_converter import apply_conversion_plan

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from ..entities.conversion import ConversionReport
    from ..entities.field_types import ConversionPlan, FieldHints, FieldValue, Record
    from .header_parser import WarningSink


def plan_field(value: FieldValue, hint: FieldType | None) -> FieldType | None:
    kind = value_kind(value)
    if hint is None:
        if kind is ValueKind.TEXT and string_is_numeric(value):  # type: ignore[arg-type]
            return FieldType.NUMBER
        return None
    if kind is not hint.kind:
        return hint
    return None


def build_conversion_plan(
    sample_record: Mapping[str, FieldValue],
    hints: Mapping[str, FieldType],
) -> ConversionPlan:
    """Decide which fields need converting, using only ``sample_record``.

    Unhinted text that looks numeric is planned as a number. A hinted field is
    planned only when its sampled value is not already of the hinted kind.
    """
    plan: ConversionPlan = {}
    for name, value in sample_record.items():
        target = plan_field(value, hints.get(name))
        if target is not None:
            plan[name] = target
    return plan


def adjust_record_types(
    records: Sequence[Record],
    field_list: Sequence[str] | None = None,
    *,
    hints: Mapping[str, FieldType] | None = None,
    strict: bool = False,
    warn: WarningSink | None = None,
) -> tuple[ConversionPlan, ConversionReport]:
    """Detect and convert field types in place.

    ``field_list`` holds header-style hints (``"FIPS:str"``, ``"+POP"``); it may
    contain duplicate names with inconsistent hints, the last one wins. Hints
    from ``field_list`` override the ones given in ``hints``.
    """
    hint_index: FieldHints = dict(hints or {})
    if field_list:
        parse_field_headers(field_list, hint_index, warn=warn)
    plan = build_conversion_plan(records[0], hint_index) if records else {}
    report = apply_conversion_plan(records, plan, strict=strict)
    return plan, report
