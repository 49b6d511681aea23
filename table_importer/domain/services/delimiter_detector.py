"""Field separator detection for delimited text."""

import re

from ...constants import Defaults, Delimiters


def get_delimiter_pattern(delimiter: str) -> re.Pattern[str]:
    """Build a pattern matching ``delimiter`` before the first line break.

    Assumes the first line holds the field headers and that header names do
    not contain the delimiter character.
    """
    return re.compile(r"^[^\n\r]+" + re.escape(delimiter))


def guess_delimiter(content: str) -> str:
    """Return the first candidate delimiter found on the header line.

    Candidates are tried in priority order (pipe, tab, comma); comma is
    returned when none of them appears.
    """
    for delimiter in Delimiters.CANDIDATES:
        if get_delimiter_pattern(delimiter).search(content):
            return delimiter
    return Defaults.DELIMITER
