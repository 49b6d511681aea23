import re

from ...constants import TypeHints

NUMERIC_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
INTEGER_LITERAL = re.compile(r"[+-]?\d+")


def clean_number(text: str) -> str:
    return text.replace(TypeHints.THOUSANDS_SEPARATOR, "")


def string_is_numeric(text: str) -> bool:
    """True when ``text`` is a complete decimal literal once commas are removed.

    Empty strings, ``nan``/``inf`` spellings and numbers followed by other
    content are rejected. Zero-padded codes such as ``"001"`` are accepted.
    """
    return NUMERIC_LITERAL.fullmatch(clean_number(text).strip()) is not None


def parse_number_text(text: str) -> int | float | None:
    """Parse a decimal literal; blank text (after removing commas) reads as 0."""
    cleaned = clean_number(text).strip()
    if not cleaned:
        return 0
    if INTEGER_LITERAL.fullmatch(cleaned):
        return int(cleaned)
    if NUMERIC_LITERAL.fullmatch(cleaned):
        return float(cleaned)
    return None
