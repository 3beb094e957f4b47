"""Calendar session: owner of the view state and note date index."""

import logging
import threading
from datetime import date
from typing import Callable, List, Optional

from calnotes.calendar_grid import advance_month, generate, month_label, select_date
from calnotes.constants import WEEKDAY_LABELS
from calnotes.dates import date_key
from calnotes.models.calendar import CalendarDayCell, CalendarViewState, DateSelected
from calnotes.note_index import NoteDateIndex, RefreshResult
from calnotes.store.base import NotesStore

logger = logging.getLogger(__name__)


class CalendarSession:
    """Single authoritative copy of the calendar view.

    View transitions are pure functions from ``calendar_grid``; the session
    keeps their results and the current index behind one lock. A refresh
    reads the store outside that lock and swaps the finished index in, so
    the previous grid stays valid while a fetch is in flight. A second lock
    keeps refreshes from overlapping.

    Usage:
        session = CalendarSession(store)
        session.refresh()
        cells = session.grid()
    """

    def __init__(
        self,
        store: NotesStore,
        today: Optional[Callable[[], date]] = None,
        view: Optional[CalendarViewState] = None,
    ):
        """
        Initialize session.

        Args:
            store: Notes store the index is refreshed from
            today: Callable returning today's date (defaults to date.today)
            view: Initial view state (defaults to today's month and date)
        """
        self.store = store
        self._today = today or date.today
        self._lock = threading.Lock()
        self._refresh_lock = threading.Lock()
        self._view = view or CalendarViewState.for_today(self._today())
        self._index = NoteDateIndex.empty()
        self.consecutive_failures = 0

    @property
    def view(self) -> CalendarViewState:
        with self._lock:
            return self._view

    @property
    def index(self) -> NoteDateIndex:
        with self._lock:
            return self._index

    @property
    def today(self) -> date:
        return self._today()

    def refresh(self) -> RefreshResult:
        """
        Reload the note date index from the store.

        Refreshes run one at a time, so a fetch never installs dates older
        than the index already in place. On failure the installed index is
        left untouched and the failure count grows; the next successful
        refresh resets it.
        """
        with self._refresh_lock:
            result = self.index.refresh(self.store)
            with self._lock:
                if result.ok:
                    self._index = result.index
                    self.consecutive_failures = 0
                else:
                    self.consecutive_failures += 1
                    failures = self.consecutive_failures
        if not result.ok:
            logger.warning(
                f"Note markers may be stale ({failures} failed refreshes in a row)"
            )
        return result

    def grid(self) -> List[CalendarDayCell]:
        """Generate the grid for the current view and index."""
        with self._lock:
            view, index = self._view, self._index
        return self._generate(view, index)

    def _generate(
        self, view: CalendarViewState, index: NoteDateIndex
    ) -> List[CalendarDayCell]:
        return generate(
            view.current_year,
            view.current_month,
            self._today(),
            view.selected_date,
            index,
        )

    def navigate(self, delta: int) -> CalendarViewState:
        """Show the previous (-1) or next (+1) month."""
        with self._lock:
            self._view = advance_month(self._view, delta)
            return self._view

    def go_to_today(self) -> DateSelected:
        """Show today's month and select today."""
        today = self._today()
        with self._lock:
            self._view = CalendarViewState.for_today(today)
        return DateSelected(date_key=date_key(today))

    def select(self, value) -> DateSelected:
        """
        Select a date.

        Raises:
            InvalidInputError: If the value is not a valid date
        """
        with self._lock:
            self._view, selected = select_date(self._view, value)
        logger.debug(f"Selected {selected.date_key}")
        return selected

    def snapshot(self) -> dict:
        """JSON-ready description of the current grid."""
        with self._lock:
            view, index = self._view, self._index
        cells = self._generate(view, index)
        return {
            "year": view.current_year,
            "month": view.current_month,
            "month_label": month_label(view),
            "weekdays": list(WEEKDAY_LABELS),
            "selected": date_key(view.selected_date),
            "cells": [cell.model_dump(mode="json") for cell in cells],
        }
