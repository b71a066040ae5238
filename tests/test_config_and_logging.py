# tests/test_config_and_logging.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from picklist_parser.config import PLConfig, get_config, load_config
from picklist_parser.core.exceptions import (
    MalformedError,
    PicklistError,
    print_error,
)
from picklist_parser.logging import get_logger, list_active_loggers


def test_project_config_is_loaded() -> None:
    cfg = get_config()
    assert cfg.max_line_length == 1024
    assert cfg.encoding == "utf-8"
    assert cfg.logging.get("file") == "picklist_parser.log"


def test_parser_defaults_fill_missing_keys() -> None:
    cfg = PLConfig({"parser": {"max_line_length": 80}})
    assert cfg.max_line_length == 80
    assert cfg.encoding == "utf-8"
    assert cfg.debug is False


def test_load_config_from_explicit_path(tmp_path: Path) -> None:
    path = tmp_path / "custom.yml"
    path.write_text("debug: true\nparser:\n  max_line_length: 256\n", encoding="utf-8")

    cfg = load_config(path)

    assert cfg.debug is True
    assert cfg.max_line_length == 256


def test_load_config_explicit_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yml")


def test_get_logger_nests_under_package_logger() -> None:
    log = get_logger("scanner")
    assert log.name == "picklist_parser.scanner"
    assert log.propagate is True
    assert "picklist_parser.scanner" in list_active_loggers()

    base = get_logger()
    assert base.name == "picklist_parser"
    assert base.propagate is False
    assert any(isinstance(h, logging.FileHandler) for h in base.handlers)


def test_error_message_includes_line_context() -> None:
    err = MalformedError("Bad line", lineno=4, line="R1")
    assert isinstance(err, PicklistError)
    assert isinstance(err, ValueError)
    assert str(err) == "Line 4: Bad line -> 'R1'"
    assert str(PicklistError("plain")) == "plain"


def test_print_error_writes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    print_error(MalformedError("Property line does not contain a value", lineno=2))

    captured = capsys.readouterr()
    assert captured.err.strip() == "ERROR: Line 2: Property line does not contain a value"
    assert captured.out == ""
