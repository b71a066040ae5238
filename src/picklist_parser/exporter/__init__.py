"""
Exporter package.

Re-exports the JSON export entry points used by the CLI.
"""

from __future__ import annotations

from .json_exporter import (
    document_to_dict,
    export_document_json,
    serialize_document_to_json_string,
)

__all__ = [
    "document_to_dict",
    "export_document_json",
    "serialize_document_to_json_string",
]
