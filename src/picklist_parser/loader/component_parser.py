# src/picklist_parser/loader/component_parser.py

from __future__ import annotations

from typing import List, Optional, Tuple

from picklist_parser.core.exceptions import MalformedError
from picklist_parser.loader.lexer import (
    WHITESPACE,
    enclosed,
    is_blank,
    next_token,
    skip_chars,
    split_on,
)
from picklist_parser.models import Component

REFDES_SEPARATOR = ","
PICKED_MARKS = frozenset({"x", "X"})
UNPICKED_MARKS = frozenset({"", " "})


def _parse_checkbox(line: str, pos: int, lineno: int) -> Tuple[bool, int]:
    """
    Read an optional ``[ ]`` / ``[x]`` marker at ``pos``.

    Returns ``(picked, cursor)``; a line without a marker is unpicked and the
    cursor is left where it was.
    """
    try:
        box = enclosed("[", "]", line, pos)
    except MalformedError:
        raise MalformedError(
            "Component checkbox is missing its closing ']'", lineno=lineno, line=line
        ) from None

    if box is None:
        return False, pos

    mark, cursor = box
    if mark in PICKED_MARKS:
        picked = True
    elif mark in UNPICKED_MARKS:
        picked = False
    else:
        raise MalformedError(
            f"Unknown component checkbox mark {mark!r}", lineno=lineno, line=line
        )

    if cursor < len(line) and line[cursor] not in WHITESPACE:
        raise MalformedError(
            "Component checkbox must be followed by whitespace",
            lineno=lineno,
            line=line,
        )
    return picked, cursor


def _parse_refdes(token: str, line: str, lineno: int) -> List[str]:
    refdes = split_on(token, REFDES_SEPARATOR)
    if any(not item for item in refdes):
        raise MalformedError(
            "Empty reference designator in list", lineno=lineno, line=line
        )
    return refdes


def parse_component(
    line: str,
    category_index: int,
    lineno: int = 0,
) -> Optional[Component]:
    """
    Parse one component line of the currently open category.

    Grammar:
        [checkbox] <refdes>[,<refdes>...] <value> <package> [<description>]

    ``checkbox`` is ``[ ]`` or ``[]`` (not picked) or ``[x]``/``[X]``
    (picked); without one the component is not picked. The description is
    the rest of the line after the package token, kept verbatim.

    Returns:
        The Component, tagged with ``category_index``, or None for a blank
        line (end of the current component run).

    Raises:
        MalformedError: for a bad checkbox, an empty designator, or fewer than
            the three mandatory tokens.
    """
    if is_blank(line):
        return None

    cursor = skip_chars(line, 0, WHITESPACE)
    picked, cursor = _parse_checkbox(line, cursor, lineno)

    fields: List[str] = []
    for label in ("reference designators", "value", "package"):
        found = next_token(line, cursor)
        if found is None:
            raise MalformedError(
                f"Component line is missing its {label}", lineno=lineno, line=line
            )
        token, cursor = found
        fields.append(token)

    refdes_token, value, package = fields
    cursor = skip_chars(line, cursor, WHITESPACE)
    description = line[cursor:] or None

    return Component(
        picked=picked,
        value=value,
        package=package,
        description=description,
        refdes=_parse_refdes(refdes_token, line, lineno),
        category_index=category_index,
        lineno=lineno,
    )
