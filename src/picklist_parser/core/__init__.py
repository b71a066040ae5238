"""
Core types shared by every layer of picklist_parser.
"""

from .exceptions import (
    DocumentStateError,
    LineTooLongError,
    MalformedError,
    PicklistError,
    PicklistIOError,
    StructureError,
    UnsupportedOperationError,
    print_error,
)

__all__ = [
    "DocumentStateError",
    "LineTooLongError",
    "MalformedError",
    "PicklistError",
    "PicklistIOError",
    "StructureError",
    "UnsupportedOperationError",
    "print_error",
]
