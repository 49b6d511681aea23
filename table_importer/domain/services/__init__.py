"""Domain services.

Delimiter detection, header hint parsing, type inference and record conversion.
"""

from .delimiter_detector import get_delimiter_pattern, guess_delimiter
from .header_parser import (
    TypeHintWarning,
    parse_field_header,
    parse_field_headers,
    remove_type_hints,
    validate_field_type,
)
from .numeric import clean_number, parse_number_text, string_is_numeric
from .record_converter import (
    ValueConversionError,
    apply_conversion_plan,
    format_number,
    format_value,
    get_conversion_strategy,
    parse_number,
)
from .type_inference import adjust_record_types, build_conversion_plan, plan_field

__all__ = [
    "get_delimiter_pattern",
    "guess_delimiter",
    "TypeHintWarning",
    "parse_field_header",
    "parse_field_headers",
    "remove_type_hints",
    "validate_field_type",
    "clean_number",
    "parse_number_text",
    "string_is_numeric",
    "ValueConversionError",
    "apply_conversion_plan",
    "format_number",
    "format_value",
    "get_conversion_strategy",
    "parse_number",
    "adjust_record_types",
    "build_conversion_plan",
    "plan_field",
]
