"""Month grid generation and calendar view transitions."""

from datetime import date, timedelta
from typing import List, Tuple

from calnotes.constants import GRID_SIZE
from calnotes.dates import (
    coerce_date,
    date_key,
    days_in_month,
    monday_offset,
    month_name,
    validate_month,
)
from calnotes.exceptions import InvalidInputError
from calnotes.models.calendar import CalendarDayCell, CalendarViewState, DateSelected
from calnotes.note_index import NoteDateIndex


def generate(
    year: int,
    month: int,
    today: date,
    selected_date: date,
    note_index: NoteDateIndex,
) -> List[CalendarDayCell]:
    """
    Build the 42-cell grid of a month, weeks starting on Monday.

    Leading cells come from the end of the previous month and trailing
    cells from the start of the next one, so the grid always covers six
    full weeks.

    Args:
        year: Year on display
        month: Zero-based month on display (0 = January)
        today: Date flagged as today
        selected_date: Date flagged as selected
        note_index: Dates that carry the has-notes marker

    Returns:
        42 cells in chronological order

    Raises:
        InvalidInputError: If the month is outside 0-11 or the grid would
            leave the range of representable dates
    """
    validate_month(month)
    today_key = date_key(today)
    selected_key = date_key(selected_date)

    def make_cell(day: date, is_current_month: bool) -> CalendarDayCell:
        key = date_key(day)
        return CalendarDayCell(
            date=day,
            day_number=day.day,
            is_current_month=is_current_month,
            is_today=key == today_key,
            is_selected=key == selected_key,
            has_notes=note_index.has(key),
        )

    try:
        return _build_cells(year, month, make_cell)
    except (ValueError, OverflowError):
        raise InvalidInputError(f"Year out of range: {year!r}")


def _build_cells(year, month, make_cell) -> List[CalendarDayCell]:
    first = date(year, month + 1, 1)
    cells = []

    # Tail of the previous month
    prev_month_last = first - timedelta(days=1)
    for offset in range(monday_offset(first) - 1, -1, -1):
        cells.append(make_cell(prev_month_last - timedelta(days=offset), False))

    for day in range(1, days_in_month(year, month) + 1):
        cells.append(make_cell(date(year, month + 1, day), True))

    # Head of the next month
    next_day = cells[-1].date
    while len(cells) < GRID_SIZE:
        next_day += timedelta(days=1)
        cells.append(make_cell(next_day, False))
    return cells


def advance_month(view: CalendarViewState, delta: int) -> CalendarViewState:
    """
    Move the displayed month by ``delta`` months.

    Months wrap around the year: December + 1 is January of the next year
    and January - 1 is December of the previous one. The selected date is
    left alone.
    """
    year, month = divmod(view.current_year * 12 + view.current_month + delta, 12)
    return view.model_copy(update={"current_month": month, "current_year": year})


def select_date(
    view: CalendarViewState, value
) -> Tuple[CalendarViewState, DateSelected]:
    """
    Select a date, whichever month is on display.

    Args:
        view: Current view state
        value: date, datetime or canonical date key

    Returns:
        New view state and the selection notification for the caller

    Raises:
        InvalidInputError: If the value is not a valid date
    """
    selected = coerce_date(value)
    new_view = view.model_copy(update={"selected_date": selected})
    return new_view, DateSelected(date_key=date_key(selected))


def month_label(view: CalendarViewState) -> str:
    """Header label of the displayed month, e.g. ``Février 2024``."""
    return f"{month_name(view.current_month)} {view.current_year}"
