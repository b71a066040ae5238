from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from picklist_parser.cli.utils import load_document_or_exit

console = Console()


def show_command(
    document: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    unpicked: bool = typer.Option(
        False,
        "--unpicked",
        "-u",
        help="Only list components that still need picking",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Print the properties and the component list of a pick list.
    """
    doc = load_document_or_exit(document, verbose=verbose)

    props = Table(title="Properties")
    props.add_column("Name", style="bold")
    props.add_column("Value")
    for prop in doc.properties:
        props.add_row(prop.name, prop.value)
    console.print(props)

    for category in doc.categories:
        table = Table(title=category.name)
        table.add_column("Picked", justify="center")
        table.add_column("Qty", justify="right")
        table.add_column("RefDes")
        table.add_column("Value")
        table.add_column("Package")
        table.add_column("Description")

        for comp in category.components:
            if unpicked and comp.picked:
                continue
            table.add_row(
                "x" if comp.picked else "",
                str(comp.quantity),
                ", ".join(comp.refdes),
                comp.value or "",
                comp.package or "",
                comp.description or "",
            )
        console.print(table)

    console.print(
        f"{len(doc.properties)} properties, {len(doc.categories)} categories, "
        f"{len(doc.picked_components())}/{len(doc.components)} components picked"
    )
