# src/picklist_parser/loader/category_parser.py

from __future__ import annotations

from picklist_parser.core.exceptions import MalformedError
from picklist_parser.loader.lexer import find_any, is_blank, span
from picklist_parser.models import Category


def is_category_line(line: str) -> bool:
    """A raw body line opens a category iff its last character is a colon."""
    return line.endswith(":")


def parse_category(line: str, lineno: int = 0) -> Category:
    """
    Parse a ``<name>:`` line into an empty Category.

    The caller only checked the last character, so the colon search here
    is done again rather than assumed.
    """
    if line.startswith(":"):
        raise MalformedError(
            "Category line must not start with a colon", lineno=lineno, line=line
        )

    colon = find_any(line, ":")
    if colon == -1:
        raise MalformedError(
            "Category line does not contain a colon", lineno=lineno, line=line
        )

    if colon != len(line) - 1:
        raise MalformedError(
            "Category name must not contain a colon", lineno=lineno, line=line
        )

    name = span(line, 0, colon - 1)
    if is_blank(name):
        raise MalformedError("Category name is empty", lineno=lineno, line=line)

    return Category(name=name)
