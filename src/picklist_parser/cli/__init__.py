
"""
CLI package for picklist_parser.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from picklist_parser.cli.app import app, main

__all__ = [
    "app",
    "main",
]
