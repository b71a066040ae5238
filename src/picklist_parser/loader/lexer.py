# src/picklist_parser/loader/lexer.py

from __future__ import annotations

from typing import List, Optional, Tuple

from picklist_parser.core.exceptions import MalformedError

WHITESPACE = " \t"


def is_blank(line: str) -> bool:
    """Return True for an empty line or one made only of spaces/tabs."""
    return skip_chars(line, 0, WHITESPACE) == len(line)


def skip_chars(line: str, pos: int, chars: str) -> int:
    """Return the index of the first character at or after ``pos`` not in ``chars``."""
    length = len(line)
    while pos < length and line[pos] in chars:
        pos += 1
    return pos


def find_any(line: str, chars: str, pos: int = 0) -> int:
    """Return the index of the first character in ``chars`` at or after ``pos``, or -1."""
    for idx in range(pos, len(line)):
        if line[idx] in chars:
            return idx
    return -1


def span(line: str, start: int, end: int) -> str:
    """Substring from ``start`` to ``end``, both inclusive."""
    if end < start:
        return ""
    return line[start:end + 1]


def enclosed(open_delim: str, close_delim: str, line: str, pos: int = 0) -> Optional[Tuple[str, int]]:
    """
    Extract the text between an opening delimiter at ``pos`` and the next
    closing delimiter, e.g. the ``x`` in ``[x]``.

    Returns:
        ``(inner_text, index_after_close)``, or None if ``line`` has no
        opening delimiter at ``pos``.

    Raises:
        MalformedError: if the opening delimiter is never closed.
    """
    if not line.startswith(open_delim, pos):
        return None

    start = pos + len(open_delim)
    close = line.find(close_delim, start)
    if close == -1:
        raise MalformedError(f"Missing closing {close_delim!r}", line=line)

    return span(line, start, close - 1), close + len(close_delim)


def split_on(text: str, delims: str) -> List[str]:
    """
    Split ``text`` at every delimiter character.

    Empty items are kept (``"R1,,R2"`` gives ``["R1", "", "R2"]``) so callers
    can reject them with their own message.
    """
    items: List[str] = []
    start = 0
    while True:
        stop = find_any(text, delims, start)
        if stop == -1:
            items.append(text[start:])
            return items
        items.append(span(text, start, stop - 1))
        start = stop + 1


def next_token(line: str, pos: int = 0) -> Optional[Tuple[str, int]]:
    """
    Extract the next whitespace-delimited token starting at ``pos``.

    Returns:
        ``(token, index_after_token)``, or None when only whitespace remains.
    """
    start = skip_chars(line, pos, WHITESPACE)
    if start >= len(line):
        return None

    stop = find_any(line, WHITESPACE, start)
    if stop == -1:
        stop = len(line)
    return line[start:stop], stop
