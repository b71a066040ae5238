# tests/test_line_reader.py

from __future__ import annotations

import io

import pytest

from picklist_parser.core.exceptions import LineTooLongError, PicklistIOError
from picklist_parser.loader import LineReader


def reader_for(data: bytes, **kwargs) -> LineReader:
    return LineReader(io.BytesIO(data), **kwargs)


def test_read_lines_strips_terminator() -> None:
    reader = reader_for(b"first\nsecond\n")
    assert reader.read_line() == "first"
    assert reader.read_line() == "second"
    assert reader.read_line() is None


def test_blank_line_is_distinct_from_end_of_stream() -> None:
    reader = reader_for(b"a\n\nb\n")
    assert reader.read_line() == "a"
    assert reader.read_line() == ""
    assert reader.read_line() == "b"
    assert reader.read_line() is None
    # Stays at end of stream.
    assert reader.read_line() is None


def test_carriage_returns_are_removed_anywhere() -> None:
    reader = reader_for(b"Ti\rtle: X\r\n\r\n")
    assert reader.read_line() == "Title: X"
    assert reader.read_line() == ""
    assert reader.read_line() is None


def test_last_line_without_terminator_is_returned() -> None:
    reader = reader_for(b"one\ntwo")
    assert reader.read_line() == "one"
    assert reader.read_line() == "two"
    assert reader.read_line() is None


def test_empty_stream_is_end_of_stream() -> None:
    assert reader_for(b"").read_line() is None


def test_lineno_tracks_returned_lines() -> None:
    reader = reader_for(b"a\n\nb")
    assert list(reader.iter_lines()) == [(1, "a"), (2, ""), (3, "b")]
    assert reader.lineno == 3


def test_line_at_max_length_is_accepted() -> None:
    reader = reader_for(b"abcd\n", max_line_length=4)
    assert reader.read_line() == "abcd"


def test_line_too_long_raises_and_skips_rest_of_line() -> None:
    reader = reader_for(b"abcdef\nok\n", max_line_length=4)

    with pytest.raises(LineTooLongError) as excinfo:
        reader.read_line()

    assert isinstance(excinfo.value, PicklistIOError)
    assert excinfo.value.lineno == 1
    # The caller decides what to do next; the reader is still usable.
    assert reader.read_line() == "ok"
    assert reader.read_line() is None


def test_utf8_is_decoded() -> None:
    reader = reader_for("Author: José\n".encode("utf-8"))
    assert reader.read_line() == "Author: José"


def test_stream_fault_is_wrapped() -> None:
    stream = io.BytesIO(b"data\n")
    stream.close()
    reader = LineReader(stream)

    with pytest.raises(PicklistIOError) as excinfo:
        reader.read_line()
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_invalid_max_line_length() -> None:
    with pytest.raises(ValueError):
        reader_for(b"", max_line_length=0)


def test_line_limit_counts_bytes_not_characters() -> None:
    # Three characters, six bytes in UTF-8.
    reader = reader_for("ééé\n".encode("utf-8"), max_line_length=4)

    with pytest.raises(LineTooLongError, match="4 bytes"):
        reader.read_line()
