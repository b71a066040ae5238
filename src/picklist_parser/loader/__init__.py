# src/picklist_parser/loader/__init__.py

"""
Public interface for the PickLE loader stack.

Intended usage from other parts of the project and tests:

    from picklist_parser.loader import (
        LineReader,
        DocumentScanner,
        ScannerState,
        PicklistFile,
        parse_property,
        parse_category,
        parse_component,
        parse_text,
        parse_file,
        load_document,
    )
"""

from __future__ import annotations

from .category_parser import is_category_line, parse_category
from .component_parser import parse_component
from .file_loader import PicklistFile, load_document
from .line_reader import DEFAULT_MAX_LINE_LENGTH, LineReader
from .property_parser import SECTION_TERMINATOR, parse_property
from .scanner import (
    DocumentScanner,
    ScannerState,
    parse_bytes,
    parse_file,
    parse_stream,
    parse_text,
)

__all__ = [
    "DEFAULT_MAX_LINE_LENGTH",
    "SECTION_TERMINATOR",
    "DocumentScanner",
    "LineReader",
    "PicklistFile",
    "ScannerState",
    "is_category_line",
    "load_document",
    "parse_bytes",
    "parse_category",
    "parse_component",
    "parse_file",
    "parse_property",
    "parse_stream",
    "parse_text",
]
