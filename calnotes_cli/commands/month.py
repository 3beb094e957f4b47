"""Display the month grid."""

import logging
from datetime import date

import typer
from typing_extensions import Annotated

from calnotes.calendar_grid import generate, month_label
from calnotes.dates import parse_date_key
from calnotes.exceptions import InvalidInputError
from calnotes.models.calendar import CalendarViewState
from calnotes_cli.context import get_context
from calnotes_cli.display import GridRenderer, console
from calnotes_cli.utils import require_session

logger = logging.getLogger(__name__)


def _parse_date(date_str: str) -> date:
    """Parse a date string in YYYY-MM-DD format.

    Raises:
        typer.BadParameter: If the date format is invalid.
    """
    try:
        return parse_date_key(date_str)
    except InvalidInputError:
        raise typer.BadParameter(f"Invalid date format: {date_str}. Use YYYY-MM-DD.")


def month(
    year: Annotated[
        int | None,
        typer.Option("--year", "-y", help="Year to display (default: selected date's year)"),
    ] = None,
    month_number: Annotated[
        int | None,
        typer.Option(
            "--month", "-m", min=1, max=12, help="Month to display, 1-12"
        ),
    ] = None,
    select: Annotated[
        str | None,
        typer.Option("--select", "-s", help="Selected date (YYYY-MM-DD, default: today)"),
    ] = None,
) -> None:
    """Display a month grid with note markers.

    Examples:
        calnotes month                         # Current month
        calnotes month --year 2024 --month 2   # February 2024
        calnotes month --select 2024-02-15     # Month of a selected date
    """
    ctx = get_context()
    session = require_session(ctx)
    today = session.today

    selected = _parse_date(select) if select else today
    view = CalendarViewState(
        current_month=(month_number - 1) if month_number else selected.month - 1,
        current_year=year if year is not None else selected.year,
        selected_date=selected,
    )

    if session.consecutive_failures:
        console.print("[yellow]Note markers unavailable (notes store unreachable)[/yellow]")

    try:
        cells = generate(
            view.current_year, view.current_month, today, view.selected_date, session.index
        )
    except InvalidInputError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    GridRenderer().render(cells, title=month_label(view))
