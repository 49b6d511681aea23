"""Type hints embedded in field headers.

Two forms are accepted:

- ``NAME:num`` / ``NAME:str`` suffixes (any hint starting with ``n`` or ``s``,
  case-insensitive)
- a leading ``+`` sigil, which requests a numeric field (``+AREA``)
"""

from collections.abc import Callable, MutableMapping, Sequence
import warnings

from ...constants import TypeHints
from ..entities.field_types import FieldType


class TypeHintWarning(UserWarning):
    pass


type WarningSink = Callable[[str], None]


def validate_field_type(hint: str) -> FieldType | None:
    """Map a hint such as ``str`` or ``NUM`` to a field type, or None if unknown."""
    text = hint.lower()
    if text.startswith(TypeHints.NUMBER_PREFIX):
        return FieldType.NUMBER
    if text.startswith(TypeHints.STRING_PREFIX):
        return FieldType.STRING
    return None


def _default_warn(message: str) -> None:
    warnings.warn(message, TypeHintWarning, stacklevel=3)


def parse_field_header(
    raw: str, *, warn: WarningSink | None = None
) -> tuple[str, FieldType | None]:
    field_type: FieldType | None = None
    if TypeHints.SEPARATOR in raw:
        parts = raw.split(TypeHints.SEPARATOR)
        name = parts[0]
        field_type = validate_field_type(parts[1])
        if field_type is None:
            (warn or _default_warn)(
                f"Invalid type hint (expected :str or :num) [{raw}]"
            )
    elif raw.startswith(TypeHints.NUMBER_SIGIL):
        name = raw[1:]
        field_type = FieldType.NUMBER
    else:
        name = raw
    return name, field_type


def parse_field_headers(
    fields: Sequence[str],
    index: MutableMapping[str, FieldType],
    *,
    warn: WarningSink | None = None,
) -> list[str]:
    """Strip type hints from ``fields`` and record them in ``index``.

    A later header with the same name overrides an earlier hint. Invalid hints
    are reported through ``warn`` (or ``warnings.warn``) and otherwise ignored.

    Returns:
        The header names without hints, in their original order.
    """
    names: list[str] = []
    for raw in fields:
        name, field_type = parse_field_header(raw, warn=warn)
        if field_type is not None:
            index[name] = field_type
        names.append(name)
    return names


def remove_type_hints(fields: Sequence[str]) -> list[str]:
    return parse_field_headers(fields, {})
