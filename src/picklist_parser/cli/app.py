
from __future__ import annotations

import typer

from picklist_parser.cli.commands.export import export_command
from picklist_parser.cli.commands.show import show_command

app = typer.Typer(
    name="picklist",
    help="PickLE pick list parser and viewer",
    add_completion=False,
)

app.command("show")(show_command)
app.command("export")(export_command)


def main():
    app()


if __name__ == "__main__":
    main()
