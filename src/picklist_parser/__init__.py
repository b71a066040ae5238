"""
picklist_parser: parser and in-memory model for PickLE pick-list documents.

    from picklist_parser import parse_file

    doc = parse_file("board.pkl")
    for category in doc.categories:
        for component in category:
            print(category.name, component.refdes, component.value)
"""

from picklist_parser.core.exceptions import (
    DocumentStateError,
    LineTooLongError,
    MalformedError,
    PicklistError,
    PicklistIOError,
    StructureError,
    UnsupportedOperationError,
    print_error,
)
from picklist_parser.loader import (
    PicklistFile,
    load_document,
    parse_bytes,
    parse_file,
    parse_stream,
    parse_text,
)
from picklist_parser.models import Category, Component, Document, Property

__version__ = "0.1.0"

__all__ = [
    "Category",
    "Component",
    "Document",
    "DocumentStateError",
    "LineTooLongError",
    "MalformedError",
    "PicklistError",
    "PicklistFile",
    "PicklistIOError",
    "Property",
    "StructureError",
    "UnsupportedOperationError",
    "load_document",
    "parse_bytes",
    "parse_file",
    "parse_stream",
    "parse_text",
    "print_error",
]
