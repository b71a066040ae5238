# src/picklist_parser/loader/file_loader.py

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Optional, Union

from picklist_parser.config import PLConfig
from picklist_parser.core.exceptions import (
    DocumentStateError,
    PicklistIOError,
    UnsupportedOperationError,
)
from picklist_parser.loader.scanner import parse_stream
from picklist_parser.logging import get_logger
from picklist_parser.models import Document

log = get_logger("file_loader")

READ_MODES = {"r", "rb"}


class PicklistFile:
    """
    File-handle lifecycle around the scanner.

        with PicklistFile("board.pkl") as pf:
            doc = pf.parse()

    Only reading is supported; PickLE documents are never written back.
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        mode: str = "r",
        config: Optional[PLConfig] = None,
    ):
        self.config = config
        self.path: Optional[Path] = None
        self.mode: Optional[str] = None
        self.document: Optional[Document] = None
        self._fh: Optional[BinaryIO] = None
        if path is not None:
            self.open(path, mode)

    @property
    def is_open(self) -> bool:
        return self._fh is not None

    def open(self, path: Union[str, Path], mode: str = "r") -> None:
        if self.is_open:
            raise DocumentStateError(
                "A document is already open. Close it before opening another one."
            )
        if mode not in READ_MODES:
            raise UnsupportedOperationError(
                f"File mode {mode!r} is not supported; documents can only be read"
            )

        file_path = Path(path)
        try:
            self._fh = file_path.open("rb")
        except OSError as exc:
            raise PicklistIOError(
                f"Couldn't open file \"{file_path}\": {exc.strerror or exc}"
            ) from exc

        self.path = file_path
        self.mode = mode
        log.debug("Opened %s", file_path)

    def parse(self) -> Document:
        if self._fh is None:
            raise DocumentStateError(
                "Can't parse a document that hasn't been opened yet."
            )

        log.info("Parsing PickLE document: %s", self.path)
        self.document = parse_stream(
            self._fh,
            config=self.config,
            source=str(self.path),
        )
        return self.document

    def close(self) -> None:
        if self._fh is None:
            raise DocumentStateError("No document is open.")
        try:
            self._fh.close()
        except OSError as exc:
            raise PicklistIOError(
                f"Couldn't close file \"{self.path}\": {exc}"
            ) from exc
        finally:
            self._fh = None
        log.debug("Closed %s", self.path)

    def __enter__(self) -> "PicklistFile":
        if not self.is_open:
            raise DocumentStateError("Open a document before entering the context.")
        return self

    def __exit__(self, *exc_info) -> None:
        if self.is_open:
            self.close()


def load_document(path: Union[str, Path], config: Optional[PLConfig] = None) -> Document:
    """Open, parse and close a PickLE file in one call."""
    with PicklistFile(path, config=config) as pf:
        return pf.parse()
