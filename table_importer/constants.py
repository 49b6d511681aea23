from typing import ClassVar


class Defaults:
    TEXT_ENCODING = "utf-8"
    DELIMITER = ","
    STRICT_NUMBERS = False
    PREVIEW_ROWS = 5
    BUFFER_NAME = "<buffer>"


class Delimiters:
    PIPE = "|"
    TAB = "\t"
    COMMA = ","
    # Tried in order; the first one found on the header line wins.
    CANDIDATES: ClassVar[tuple[str, ...]] = (PIPE, TAB, COMMA)


class TypeHints:
    SEPARATOR = ":"
    NUMBER_SIGIL = "+"
    NUMBER_PREFIX = "n"
    STRING_PREFIX = "s"
    THOUSANDS_SEPARATOR = ","


class SourceFormats:
    DELIMITED = "delimited"
    DBF = "dbf"
    SAS7BDAT = "sas7bdat"
    XPORT = "xpt"
    BINARY_EXTENSIONS: ClassVar[dict[str, str]] = {
        ".dbf": DBF,
        ".sas7bdat": SAS7BDAT,
        ".xpt": XPORT,
    }