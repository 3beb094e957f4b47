"""CLI commands package."""

from calnotes_cli.commands.month import month
from calnotes_cli.commands.notes import add, delete, edit, notes
from calnotes_cli.commands.serve import serve

__all__ = [
    "add",
    "delete",
    "edit",
    "month",
    "notes",
    "serve",
]
