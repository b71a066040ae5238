# tests/test_json_exporter.py

from __future__ import annotations

import json
from pathlib import Path

from picklist_parser.exporter import (
    document_to_dict,
    export_document_json,
    serialize_document_to_json_string,
)
from picklist_parser.loader import parse_text


def test_document_to_dict_structure(demo_text: str) -> None:
    data = document_to_dict(parse_text(demo_text))

    assert data["properties"] == [
        {"name": "Title", "value": "Demo Board"},
        {"name": "Rev", "value": "A"},
    ]
    (category,) = data["categories"]
    assert category["name"] == "Resistors"

    (component,) = category["components"]
    assert component["category"] == "Resistors"
    assert "category_index" not in component
    assert component["refdes"] == ["R1", "R2"]
    assert component["quantity"] == 2
    assert component["picked"] is False


def test_compact_and_pretty_serialization(demo_text: str) -> None:
    doc = parse_text(demo_text)

    compact = serialize_document_to_json_string(doc, indent=None)
    pretty = serialize_document_to_json_string(doc, indent=2)

    assert "\n" not in compact
    assert "\n" in pretty
    assert json.loads(compact) == json.loads(pretty)


def test_export_document_json_writes_file(tmp_path: Path, demo_text: str) -> None:
    out = tmp_path / "nested" / "demo.json"
    export_document_json(parse_text(demo_text), out)

    assert out.is_file()
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["categories"][0]["components"][0]["value"] == "10k"
