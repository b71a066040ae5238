
from __future__ import annotations

import time
from pathlib import Path

import typer
from rich.console import Console

from picklist_parser.core.exceptions import PicklistError, print_error
from picklist_parser.models import Document
from picklist_parser.parser_core import PicklistParser

console = Console()


def load_document_or_exit(path: Path, *, verbose: bool = False) -> Document:
    """
    Parse ``path`` for a CLI command.

    A parse failure prints ``ERROR: ...`` to STDERR and exits with status 1.
    """
    t0 = time.perf_counter()

    try:
        document = PicklistParser().run(path)
    except PicklistError as exc:
        print_error(exc)
        raise typer.Exit(code=1) from exc

    if verbose:
        console.log(f"Parsed {path} in {time.perf_counter() - t0:.3f}s")

    return document


def write_text(payload: str, *, out: Path | None) -> None:
    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
