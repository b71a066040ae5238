from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from picklist_parser.cli.utils import load_document_or_exit, write_text
from picklist_parser.exporter import serialize_document_to_json_string

console = Console(stderr=True)


def export_command(
    document: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export a parsed pick list as JSON (stdout by default).
    """
    doc = load_document_or_exit(document, verbose=verbose)

    payload = serialize_document_to_json_string(doc, indent=2 if pretty else None)
    write_text(payload, out=out)

    if verbose:
        console.log("Export complete")
