"""Domain entities.

Value kinds, field types, conversion outcomes and the imported table.
"""

from .conversion import ConversionFailure, ConversionReport, ConversionResult
from .data_table import DataTable, TableInfo
from .field_types import (
    ConversionPlan,
    FieldHints,
    FieldType,
    FieldValue,
    Record,
    ValueKind,
    describe_plan,
    value_kind,
)

__all__ = [
    # Values
    "FieldValue",
    "Record",
    "ValueKind",
    "value_kind",
    # Types and plans
    "FieldType",
    "FieldHints",
    "ConversionPlan",
    "describe_plan",
    # Conversion outcomes
    "ConversionResult",
    "ConversionFailure",
    "ConversionReport",
    # Tables
    "DataTable",
    "TableInfo",
]
