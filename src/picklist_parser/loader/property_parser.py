# src/picklist_parser/loader/property_parser.py

from __future__ import annotations

from typing import Optional

from picklist_parser.core.exceptions import MalformedError
from picklist_parser.loader.lexer import WHITESPACE, find_any, skip_chars, span
from picklist_parser.models import Property

SECTION_TERMINATOR = "---"


def parse_property(line: str, lineno: int = 0) -> Optional[Property]:
    """
    Parse one header line into a Property.

    Grammar:
        <name> ":" [":" | " " | "\\t"]* <value>

    The name is everything before the first colon. The value is the rest of
    the line after the run of colons/whitespace that follows it, copied
    verbatim (trailing whitespace included).

    Returns:
        A Property, or None if the line is the ``---`` section terminator.

    Raises:
        MalformedError: for a leading dash (other than ``---``), a leading
            colon, a missing colon or a missing value.
    """
    if line.startswith("-"):
        if line == SECTION_TERMINATOR:
            return None
        raise MalformedError(
            "A property can't start with a dash", lineno=lineno, line=line
        )

    if line.startswith(":"):
        raise MalformedError(
            "Property line must not start with a colon", lineno=lineno, line=line
        )

    colon = find_any(line, ":")
    if colon == -1:
        raise MalformedError(
            "Property line does not contain a colon", lineno=lineno, line=line
        )

    name = span(line, 0, colon - 1)
    cursor = skip_chars(line, colon, ":" + WHITESPACE)
    if cursor >= len(line):
        raise MalformedError(
            "Property line does not contain a value", lineno=lineno, line=line
        )

    return Property(name=name, value=line[cursor:])
