"""Note editing on top of the notes store."""

import logging
from typing import List

from calnotes.calendar_session import CalendarSession
from calnotes.dates import coerce_date, date_key, format_time_fr
from calnotes.models.note import Note, NoteDraft

logger = logging.getLogger(__name__)


class NotesService:
    """Create, edit and delete the notes of a date.

    Every successful mutation runs the session refresh so has-notes markers
    follow the store.
    """

    def __init__(self, session: CalendarSession):
        self.session = session
        self.store = session.store

    def list_for_date(self, value) -> List[Note]:
        """Notes of a date, newest first."""
        key = date_key(coerce_date(value))
        return self.store.fetch_notes_for_date(key)

    def create(self, value, title: str | None, content: str | None) -> Note:
        """
        Create a note on a date.

        Raises:
            InvalidInputError: If the date is malformed or title/content is blank
            NotesStoreError: If the store rejects the note
        """
        key = date_key(coerce_date(value))
        draft = NoteDraft.build(title, content)
        note = self.store.create_note(key, draft)
        self.session.refresh()
        return note

    def update(self, note_id: str, title: str | None, content: str | None) -> Note:
        """Replace the title and content of a note."""
        draft = NoteDraft.build(title, content)
        note = self.store.update_note(note_id, draft)
        self.session.refresh()
        return note

    def delete(self, note_id: str) -> None:
        self.store.delete_note(note_id)
        self.session.refresh()
        logger.debug(f"Deleted note {note_id}")


def note_to_dict(note: Note) -> dict:
    """JSON-ready note with its display time."""
    data = note.model_dump(mode="json")
    data["time_label"] = format_time_fr(note.created_at)
    return data
