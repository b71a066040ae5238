# tests/test_component_parser.py

from __future__ import annotations

import pytest

from picklist_parser.core.exceptions import MalformedError
from picklist_parser.loader import parse_component


def test_component_without_checkbox() -> None:
    comp = parse_component("R1,R2 10k 0805 pull-ups", category_index=0, lineno=5)

    assert comp.picked is False
    assert comp.refdes == ["R1", "R2"]
    assert comp.value == "10k"
    assert comp.package == "0805"
    assert comp.description == "pull-ups"
    assert comp.name is None
    assert comp.category_index == 0
    assert comp.lineno == 5


@pytest.mark.parametrize(
    ("line", "picked"),
    [
        ("[ ] R1 10k 0805", False),
        ("[] R1 10k 0805", False),
        ("[x] R1 10k 0805", True),
        ("[X] R1 10k 0805", True),
    ],
)
def test_checkbox_sets_picked(line: str, picked: bool) -> None:
    comp = parse_component(line, category_index=2)
    assert comp.picked is picked
    assert comp.refdes == ["R1"]
    assert comp.category_index == 2


def test_description_is_optional() -> None:
    comp = parse_component("C4 10u 1206", category_index=0)
    assert comp.description is None
    comp = parse_component("C4 10u 1206   ", category_index=0)
    assert comp.description is None


def test_description_keeps_inner_text_verbatim() -> None:
    comp = parse_component("U1\tATmega328P\tTQFP-32\tMain MCU,  5V: 16 MHz", 0)
    assert comp.value == "ATmega328P"
    assert comp.package == "TQFP-32"
    assert comp.description == "Main MCU,  5V: 16 MHz"


def test_leading_whitespace_is_allowed() -> None:
    comp = parse_component("    [x] C1 100n 0603 Decoupling", 0)
    assert comp.picked is True
    assert comp.refdes == ["C1"]


def test_duplicate_refdes_are_kept_in_order() -> None:
    comp = parse_component("R3,R1,R3 1k 0402", 0)
    assert comp.refdes == ["R3", "R1", "R3"]
    assert comp.quantity == 3


def test_blank_line_ends_component_run() -> None:
    assert parse_component("", 0) is None
    assert parse_component(" \t ", 0) is None


@pytest.mark.parametrize(
    "line",
    [
        "R1",
        "R1 10k",
        "[x] R1 10k",
        "[ ]",
    ],
)
def test_missing_mandatory_tokens(line: str) -> None:
    with pytest.raises(MalformedError, match="missing"):
        parse_component(line, 0, lineno=4)


@pytest.mark.parametrize("line", ["R1,,R2 10k 0805", ",R1 10k 0805", "R1, 10k 0805"])
def test_empty_refdes_is_rejected(line: str) -> None:
    with pytest.raises(MalformedError, match="Empty reference designator"):
        parse_component(line, 0)


def test_unknown_checkbox_mark_is_rejected() -> None:
    with pytest.raises(MalformedError, match="checkbox mark"):
        parse_component("[?] R1 10k 0805", 0)


def test_unclosed_checkbox_is_rejected() -> None:
    with pytest.raises(MalformedError, match="closing"):
        parse_component("[x R1 10k 0805", 0, lineno=12)


def test_checkbox_glued_to_refdes_is_rejected() -> None:
    with pytest.raises(MalformedError, match="followed by whitespace"):
        parse_component("[x]R1 10k 0805", 0)
