"""Run the web application."""

import logging

import typer
from typing_extensions import Annotated

from calnotes import create_app
from calnotes.exceptions import StoreConfigurationError
from calnotes.store import InMemoryNotesStore
from calnotes_cli.context import get_context

logger = logging.getLogger(__name__)


def serve(
    host: Annotated[
        str | None,
        typer.Option("--host", help="Bind address (default: HOST or 127.0.0.1)"),
    ] = None,
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="Port (default: PORT or 5000)"),
    ] = None,
    demo: Annotated[
        bool,
        typer.Option("--demo", help="Use an in-memory notes store"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable the Flask debugger"),
    ] = False,
) -> None:
    """Serve the calendar web application."""
    ctx = get_context()
    config = ctx.config

    try:
        store = InMemoryNotesStore() if demo else ctx.store
    except StoreConfigurationError as e:
        logger.error(f"{e} Or run with --demo.")
        raise typer.Exit(1)

    app = create_app(store=store, config=config)
    app.run(host=host or config.host, port=port or config.port, debug=debug)
