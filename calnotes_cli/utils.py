"""CLI helpers for resolving dependencies with friendly failures."""

import logging

import typer

from calnotes.calendar_session import CalendarSession
from calnotes.exceptions import StoreConfigurationError
from calnotes.notes_service import NotesService
from calnotes_cli.context import CLIContext

logger = logging.getLogger(__name__)


def require_session(ctx: CLIContext) -> CalendarSession:
    """Get the calendar session or exit if the store is not configured.

    Raises:
        typer.Exit: If SUPABASE_URL or SUPABASE_ANON_KEY is missing
    """
    try:
        return ctx.session
    except StoreConfigurationError as e:
        logger.error(str(e))
        raise typer.Exit(1)


def require_service(ctx: CLIContext) -> NotesService:
    """Get the notes service or exit if the store is not configured."""
    require_session(ctx)
    return ctx.service
