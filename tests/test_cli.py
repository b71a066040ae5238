# tests/test_cli.py

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from picklist_parser.cli import app
from picklist_parser.utils import mock_file_path

runner = CliRunner()


def test_show_prints_properties_and_categories() -> None:
    result = runner.invoke(app, ["show", str(mock_file_path("demo_board.pkl"))])

    assert result.exit_code == 0, result.output
    assert "Demo Board" in result.output
    assert "Resistors" in result.output
    assert "Integrated Circuits" in result.output
    assert "2/6 components picked" in result.output


def test_export_writes_json_to_stdout() -> None:
    result = runner.invoke(app, ["export", str(mock_file_path("demo_board.pkl"))])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert [c["name"] for c in data["categories"]] == [
        "Resistors",
        "Capacitors",
        "Integrated Circuits",
    ]


def test_export_to_file(tmp_path: Path) -> None:
    out = tmp_path / "demo.json"
    result = runner.invoke(
        app,
        ["export", str(mock_file_path("demo_board.pkl")), "--out", str(out), "--pretty"],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(out.read_text(encoding="utf-8"))["properties"][0]["name"] == "Name"


def test_parse_error_exits_with_status_one() -> None:
    result = runner.invoke(
        app, ["show", str(mock_file_path("component_before_category.pkl"))]
    )

    assert result.exit_code == 1
    assert "ERROR:" in result.output
