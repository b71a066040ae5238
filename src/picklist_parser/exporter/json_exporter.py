"""
json_exporter.py
Structured JSON exporter for parsed PickLE documents.

This exporter:
- Converts the Document dataclasses to plain dictionaries
- Resolves each component's category index to the category name
- Is deterministic: keys and list order follow the source document
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict

from picklist_parser.logging import get_logger
from picklist_parser.models import Category, Component, Document

log = get_logger("json_exporter")


def _component_dict(component: Component, category: Category) -> Dict[str, Any]:
    data = asdict(component)
    data.pop("category_index", None)
    data["category"] = category.name
    data["quantity"] = component.quantity
    return data


def document_to_dict(document: Document) -> Dict[str, Any]:
    """
    Convert a Document into a JSON-safe dict.

    Properties are kept as an ordered list of ``{"name", "value"}`` pairs
    rather than a mapping because names are not required to be unique.
    """
    return {
        "source": document.source,
        "properties": [asdict(p) for p in document.properties],
        "categories": [
            {
                "name": category.name,
                "components": [
                    _component_dict(component, category)
                    for component in category.components
                ],
            }
            for category in document.categories
        ],
    }


def serialize_document_to_json_string(document: Document, indent: int | None = 2) -> str:
    if indent is None:
        return json.dumps(
            document_to_dict(document), separators=(",", ":"), ensure_ascii=False
        )
    return json.dumps(document_to_dict(document), indent=indent, ensure_ascii=False)


def export_document_json(document: Document, output_path: str | Path, indent: int = 2) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting document JSON to: %s (properties=%d, categories=%d)",
        output_path,
        len(document.properties),
        len(document.categories),
    )

    json_str = serialize_document_to_json_string(document, indent=indent)
    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    log.info("JSON export complete. size=%d bytes", output_path.stat().st_size)
