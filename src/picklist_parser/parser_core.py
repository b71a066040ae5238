"""
parser_core.py
High-level parsing engine with logging integration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from picklist_parser.config import get_config
from picklist_parser.core.exceptions import PicklistError
from picklist_parser.loader.file_loader import PicklistFile
from picklist_parser.logging import get_logger
from picklist_parser.models import Document


class PicklistParser:
    """
    High-level parser:
      - opens the file
      - scans properties, categories and components
      - closes the file, even when parsing fails
    """

    def __init__(self, config=None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger("parser_core")
        self.document: Optional[Document] = None

    def run(self, input_path: Union[str, Path]) -> Document:
        """
        Full parse sequence.
        Returns: the parsed Document
        """
        self.log.info(f"Loading PickLE document: {input_path}")

        try:
            with PicklistFile(input_path, config=self.cfg) as pf:
                self.document = pf.parse()
        except PicklistError as exc:
            self.log.error(f"Parse failed: {exc}")
            raise

        if self.cfg.debug:
            for prop in self.document.properties:
                self.log.debug(f"Property {prop.name} = {prop.value}")
            for category in self.document.categories:
                self.log.debug(f"Category {category.name}: {len(category)} components")

        return self.document
