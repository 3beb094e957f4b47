"""List, add, edit and delete notes."""

import logging

import typer
from rich.markup import escape
from typing_extensions import Annotated

from calnotes.dates import date_key
from calnotes.exceptions import NotesError
from calnotes_cli.commands.month import _parse_date
from calnotes_cli.context import get_context
from calnotes_cli.display import NoteRenderer, console
from calnotes_cli.utils import require_service

logger = logging.getLogger(__name__)


def notes(
    target_date: Annotated[
        str,
        typer.Argument(help="Date (YYYY-MM-DD)"),
    ],
) -> None:
    """List the notes of a date, newest first."""
    ctx = get_context()
    key = date_key(_parse_date(target_date))

    try:
        found = require_service(ctx).list_for_date(key)
    except NotesError as e:
        logger.error(f"Could not load notes: {e}")
        raise typer.Exit(1)

    NoteRenderer().render(key, found)


def add(
    target_date: Annotated[
        str,
        typer.Argument(help="Date (YYYY-MM-DD)"),
    ],
    title: Annotated[
        str,
        typer.Option("--title", "-t", help="Note title"),
    ],
    content: Annotated[
        str,
        typer.Option("--content", "-c", help="Note content"),
    ],
) -> None:
    """Create a note on a date."""
    ctx = get_context()
    key = date_key(_parse_date(target_date))

    try:
        note = require_service(ctx).create(key, title, content)
    except NotesError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    console.print(f"[bold green]✓[/bold green] Note '{escape(note.title)}' created on {key}")
    console.print(f"  ID: {note.id}")


def edit(
    note_id: Annotated[
        str,
        typer.Argument(help="Note ID"),
    ],
    title: Annotated[
        str,
        typer.Option("--title", "-t", help="New title"),
    ],
    content: Annotated[
        str,
        typer.Option("--content", "-c", help="New content"),
    ],
) -> None:
    """Replace the title and content of a note."""
    ctx = get_context()

    try:
        note = require_service(ctx).update(note_id, title, content)
    except NotesError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    console.print(f"[bold green]✓[/bold green] Note {note.id} updated")


def delete(
    note_id: Annotated[
        str,
        typer.Argument(help="Note ID"),
    ],
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Skip confirmation prompt"),
    ] = False,
) -> None:
    """Delete a note."""
    ctx = get_context()

    if not force:
        if not typer.confirm("Êtes-vous sûr de vouloir supprimer cette note ?"):
            typer.echo("Delete cancelled.")
            return

    try:
        require_service(ctx).delete(note_id)
    except NotesError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    console.print(f"[bold green]✓[/bold green] Note {note_id} deleted")
