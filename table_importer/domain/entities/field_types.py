from collections.abc import Mapping
from enum import Enum, StrEnum

type FieldValue = object
type Record = dict[str, FieldValue]


class ValueKind(Enum):
    TEXT = "text"
    NUMBER = "number"
    OTHER = "other"


class FieldType(StrEnum):
    NUMBER = "number"
    STRING = "string"

    @property
    def kind(self) -> ValueKind:
        if self is FieldType.NUMBER:
            return ValueKind.NUMBER
        return ValueKind.TEXT


type FieldHints = dict[str, FieldType]
type ConversionPlan = dict[str, FieldType]


def value_kind(value: object) -> ValueKind:
    # bool is an int subclass but is never treated as a number here
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, bool):
        return ValueKind.OTHER
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    return ValueKind.OTHER


def describe_plan(plan: Mapping[str, FieldType]) -> str:
    if not plan:
        return "no conversion"
    return ", ".join(f"{name}:{field_type.value}" for name, field_type in plan.items())
