"""
CLI command modules for picklist_parser.

Each command module defines a single Typer-compatible command function.
"""

from picklist_parser.cli.commands.export import export_command
from picklist_parser.cli.commands.show import show_command

__all__ = [
    "export_command",
    "show_command",
]
