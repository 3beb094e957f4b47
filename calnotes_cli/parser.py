"""Typer application and command routing."""

import typer
from typing_extensions import Annotated

from calnotes_cli import setup_logging
from calnotes_cli.commands import add, delete, edit, month, notes, serve
from calnotes_cli.context import CLIContext, set_context

app = typer.Typer(
    help="Calendar notes: pick a date, keep short notes on it.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Set up logging and the shared command context."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    set_context(ctx)


app.command()(month)
app.command()(notes)
app.command()(add)
app.command()(edit)
app.command()(delete)
app.command()(serve)
