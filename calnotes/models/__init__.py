"""Pydantic models for calendar notes."""

from calnotes.models.calendar import CalendarDayCell, CalendarViewState, DateSelected
from calnotes.models.note import Note, NoteDraft

__all__ = [
    "CalendarDayCell",
    "CalendarViewState",
    "DateSelected",
    "Note",
    "NoteDraft",
]
