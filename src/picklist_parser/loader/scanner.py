# src/picklist_parser/loader/scanner.py

from __future__ import annotations

import io
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Optional, Union

from picklist_parser.config import PLConfig, get_config
from picklist_parser.core.exceptions import (
    PicklistError,
    PicklistIOError,
    StructureError,
)
from picklist_parser.loader.category_parser import is_category_line, parse_category
from picklist_parser.loader.component_parser import parse_component
from picklist_parser.loader.lexer import WHITESPACE, is_blank
from picklist_parser.loader.line_reader import LineReader
from picklist_parser.loader.property_parser import parse_property
from picklist_parser.logging import get_logger
from picklist_parser.models import Document

log = get_logger("scanner")


class ScannerState(Enum):
    START = "start"
    IN_PROPERTIES = "in_properties"
    IN_BODY = "in_body"
    DONE = "done"
    ERROR = "error"


class DocumentScanner:
    """
    Two-phase, single-pass scanner that turns a line stream into a Document.

        START -> IN_PROPERTIES --"---"--> IN_BODY --EOF--> DONE
                       \\                    \\
                        +------ any error ----+--> ERROR

    Blank lines are skipped in both phases. In the body a line whose last
    character is a colon opens a category; every other line is a component
    of the most recent category. The first error aborts the scan; the
    partially populated document stays available as ``self.document``.
    """

    def __init__(self, reader: LineReader, document: Optional[Document] = None):
        self.reader = reader
        self.document = document if document is not None else Document()
        self.state = ScannerState.START
        self._current_category: Optional[int] = None

    def scan(self) -> Document:
        if self.state is not ScannerState.START:
            raise RuntimeError(f"Scanner already used (state={self.state.value})")

        try:
            self.state = ScannerState.IN_PROPERTIES
            self._scan_properties()
            self.state = ScannerState.IN_BODY
            log.debug("Properties section ended at line %d", self.reader.lineno)
            self._scan_body()
        except PicklistError:
            self.state = ScannerState.ERROR
            raise

        self.state = ScannerState.DONE
        log.info(
            "Parsed document: %d properties, %d categories, %d components",
            len(self.document.properties),
            len(self.document.categories),
            sum(len(c) for c in self.document.categories),
        )
        return self.document

    # ------------------------------------------------------------------ #
    # Phases
    # ------------------------------------------------------------------ #

    def _scan_properties(self) -> None:
        while True:
            line = self.reader.read_line()
            if line is None:
                raise StructureError(
                    "Document ended before the '---' section terminator",
                    lineno=self.reader.lineno,
                )
            if is_blank(line):
                continue

            prop = parse_property(line, lineno=self.reader.lineno)
            if prop is None:
                return
            self.document.add_property(prop)

    def _scan_body(self) -> None:
        while True:
            line = self.reader.read_line()
            if line is None:
                return
            if is_blank(line):
                continue

            lineno = self.reader.lineno
            if is_category_line(line):
                category = parse_category(line, lineno=lineno)
                self._current_category = self.document.add_category(category)
                log.debug("Line %d: category %r", lineno, category.name)
                continue

            if self._current_category is None:
                message = "Component found before any category"
                if line.rstrip(WHITESPACE).endswith(":"):
                    message += (
                        "; a category line must end with ':' "
                        "(this line has whitespace after it)"
                    )
                raise StructureError(message, lineno=lineno, line=line)

            component = parse_component(line, self._current_category, lineno=lineno)
            if component is not None:
                self.document.add_component(component, self._current_category)


# ---------------------------------------------------------------------- #
# Convenience entry points
# ---------------------------------------------------------------------- #

def parse_stream(
    stream: BinaryIO,
    *,
    max_line_length: Optional[int] = None,
    encoding: Optional[str] = None,
    source: Optional[str] = None,
    config: Optional[PLConfig] = None,
) -> Document:
    """
    Parse a PickLE document from an open binary stream.

    ``max_line_length`` and ``encoding`` default to the ``parser`` section
    of ``config`` (the project config when not given).
    """
    cfg = config if config is not None else get_config()
    reader = LineReader(
        stream,
        max_line_length=max_line_length if max_line_length is not None else cfg.max_line_length,
        encoding=encoding if encoding is not None else cfg.encoding,
    )
    scanner = DocumentScanner(reader, Document(source=source))
    return scanner.scan()


def parse_bytes(data: bytes, **kwargs) -> Document:
    return parse_stream(io.BytesIO(data), **kwargs)


def parse_text(text: str, **kwargs) -> Document:
    encoding = kwargs.get("encoding")
    if encoding is None:
        cfg = kwargs.get("config")
        encoding = (cfg if cfg is not None else get_config()).encoding
    return parse_bytes(text.encode(encoding), **kwargs)


def parse_file(path: Union[str, Path], **kwargs) -> Document:
    """
    Parse the PickLE document at ``path``.

    Raises:
        PicklistIOError: if the file cannot be opened.
        MalformedError: if the document violates the grammar.
    """
    file_path = Path(path)
    try:
        fh = file_path.open("rb")
    except OSError as exc:
        raise PicklistIOError(f"Couldn't open file \"{file_path}\": {exc}") from exc

    with fh:
        kwargs.setdefault("source", str(file_path))
        return parse_stream(fh, **kwargs)
