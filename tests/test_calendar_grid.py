"""Tests for month grid generation and view transitions."""

import calendar
from datetime import date, timedelta

import pytest

from calnotes.calendar_grid import advance_month, generate, month_label, select_date
from calnotes.exceptions import InvalidInputError
from calnotes.models.calendar import CalendarViewState
from calnotes.note_index import NoteDateIndex

EMPTY = NoteDateIndex.empty()


def test_generate_february_leap_year():
    """February 2024 starts on a Thursday and has 29 days."""
    cells = generate(2024, 1, date(2024, 2, 15), date(2024, 2, 15), EMPTY)

    assert len(cells) == 42
    assert cells[0].date == date(2024, 1, 29)
    assert cells[0].date.weekday() == 0
    assert cells[-1].date == date(2024, 3, 10)

    feb_15 = next(c for c in cells if c.date == date(2024, 2, 15))
    assert feb_15.is_today is True
    assert feb_15.is_selected is True
    assert feb_15.is_current_month is True
    assert date(2024, 2, 29) in [c.date for c in cells if c.is_current_month]


def test_generate_marks_dates_with_notes():
    index = NoteDateIndex(["2024-01-10"])
    cells = generate(2024, 0, date(2024, 2, 15), date(2024, 2, 15), index)

    flagged = [c for c in cells if c.has_notes]
    assert [c.date for c in flagged] == [date(2024, 1, 10)]


@pytest.mark.parametrize("year", [1900, 2000, 2023, 2024, 2025])
def test_generate_invariants_for_every_month(year):
    today = date(2024, 6, 1)
    for month in range(12):
        cells = generate(year, month, today, today, EMPTY)
        assert len(cells) == 42

        dates = [c.date for c in cells]
        for prev, nxt in zip(dates, dates[1:]):
            assert nxt - prev == timedelta(days=1)
        assert dates[0].weekday() == 0

        current = [c for c in cells if c.is_current_month]
        assert len(current) == calendar.monthrange(year, month + 1)[1]
        assert all(c.date.month == month + 1 and c.date.year == year for c in current)
        assert [c.day_number for c in current] == list(range(1, len(current) + 1))

        # One contiguous current-month run
        flags = [c.is_current_month for c in cells]
        first = flags.index(True)
        assert all(flags[first : first + len(current)])
        assert not any(flags[first + len(current) :])

        if month == 1:
            has_leap_day = any(c.day_number == 29 for c in current)
            assert has_leap_day == calendar.isleap(year)


def test_month_starting_on_monday_has_no_leading_cells():
    """April 2024 starts on a Monday."""
    cells = generate(2024, 3, date(2024, 4, 1), date(2024, 4, 1), EMPTY)
    assert cells[0].date == date(2024, 4, 1)
    assert cells[0].is_current_month is True


def test_month_starting_on_sunday_has_six_leading_cells():
    """September 2024 starts on a Sunday."""
    cells = generate(2024, 8, date(2024, 9, 1), date(2024, 9, 1), EMPTY)
    assert cells[0].date == date(2024, 8, 26)
    assert [c.is_current_month for c in cells[:7]] == [False] * 6 + [True]


def test_today_flag_only_when_in_window():
    cells = generate(2024, 1, date(2024, 3, 10), date(2024, 2, 1), EMPTY)
    assert [c.date for c in cells if c.is_today] == [date(2024, 3, 10)]

    cells = generate(2024, 1, date(2024, 3, 11), date(2024, 2, 1), EMPTY)
    assert not any(c.is_today for c in cells)


def test_selected_date_in_other_month_is_not_flagged():
    cells = generate(2024, 5, date(2024, 6, 1), date(2024, 9, 20), EMPTY)
    assert not any(c.is_selected for c in cells)


def test_selected_date_in_leading_cells_is_flagged():
    cells = generate(2024, 1, date(2024, 2, 1), date(2024, 1, 30), EMPTY)
    selected = [c for c in cells if c.is_selected]
    assert len(selected) == 1
    assert selected[0].is_current_month is False


def test_changing_index_changes_only_those_cells():
    today = date(2024, 2, 15)
    before = generate(2024, 1, today, today, NoteDateIndex(["2024-02-01"]))
    after = generate(
        2024, 1, today, today, NoteDateIndex(["2024-02-01", "2024-02-20", "2024-03-05"])
    )

    changed = [b.date for b, a in zip(before, after) if b != a]
    assert changed == [date(2024, 2, 20), date(2024, 3, 5)]
    assert all(a.has_notes for a in after if a.date in changed)


def test_generate_rejects_invalid_month():
    with pytest.raises(InvalidInputError):
        generate(2024, 12, date(2024, 1, 1), date(2024, 1, 1), EMPTY)


def test_generate_rejects_unrepresentable_grid():
    with pytest.raises(InvalidInputError):
        generate(9999, 11, date(2024, 1, 1), date(2024, 1, 1), EMPTY)


def test_advance_month_wraps_forward():
    view = CalendarViewState(current_month=11, current_year=2024, selected_date=date(2024, 12, 3))
    nxt = advance_month(view, 1)
    assert (nxt.current_month, nxt.current_year) == (0, 2025)
    assert nxt.selected_date == date(2024, 12, 3)


def test_advance_month_wraps_backward():
    view = CalendarViewState(current_month=0, current_year=2025, selected_date=date(2025, 1, 3))
    prev = advance_month(view, -1)
    assert (prev.current_month, prev.current_year) == (11, 2024)


def test_advance_month_is_its_own_inverse():
    selected = date(2024, 5, 5)
    for year in (1999, 2024):
        for month in range(12):
            view = CalendarViewState(current_month=month, current_year=year, selected_date=selected)
            assert advance_month(advance_month(view, 1), -1) == view
            assert advance_month(advance_month(view, -1), 1) == view


def test_select_date_returns_notification():
    view = CalendarViewState(current_month=1, current_year=2024, selected_date=date(2024, 2, 15))
    new_view, selected = select_date(view, date(2024, 7, 14))

    assert new_view.selected_date == date(2024, 7, 14)
    assert (new_view.current_month, new_view.current_year) == (1, 2024)
    assert selected.date_key == "2024-07-14"
    assert view.selected_date == date(2024, 2, 15)


def test_select_date_accepts_key_and_rejects_malformed():
    view = CalendarViewState.for_today(date(2024, 2, 15))
    new_view, selected = select_date(view, "2024-02-01")
    assert new_view.selected_date == date(2024, 2, 1)

    with pytest.raises(InvalidInputError):
        select_date(view, "2024-02-31")


def test_month_label():
    view = CalendarViewState(current_month=1, current_year=2024, selected_date=date(2024, 2, 15))
    assert month_label(view) == "Février 2024"
