"""In-memory notes store for tests and demo mode."""

import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, List

from calnotes.dates import coerce_date, date_key
from calnotes.exceptions import NoteNotFoundError, TransientFetchError
from calnotes.models.note import Note, NoteDraft

logger = logging.getLogger(__name__)


class InMemoryNotesStore:
    """Notes store keeping rows in a dict.

    ``fail_fetches`` makes ``fetch_all_note_dates`` raise, to exercise the
    degraded path of index refreshes.
    """

    def __init__(self, notes: List[Note] | None = None):
        self._notes: Dict[str, Note] = {}
        self.fail_fetches = False
        for note in notes or []:
            stored = note if note.id else note.model_copy(update={"id": uuid.uuid4().hex})
            self._notes[stored.id] = stored

    def fetch_all_note_dates(self) -> List[str]:
        if self.fail_fetches:
            raise TransientFetchError("Notes store unavailable")
        return sorted({note.date for note in self._notes.values()})

    def fetch_notes_for_date(self, key: str) -> List[Note]:
        key = date_key(coerce_date(key))
        matching = [n for n in self._notes.values() if n.date == key]
        return sorted(matching, key=_created_sort_key, reverse=True)

    def create_note(self, day: str, draft: NoteDraft) -> Note:
        now = datetime.now(timezone.utc)
        note = Note(
            id=uuid.uuid4().hex,
            date=date_key(coerce_date(day)),
            title=draft.title,
            content=draft.content,
            created_at=now,
            updated_at=now,
        )
        self._notes[note.id] = note
        logger.debug(f"Created note {note.id} on {note.date}")
        return note

    def update_note(self, note_id: str, draft: NoteDraft) -> Note:
        if note_id not in self._notes:
            raise NoteNotFoundError(f"Note not found: {note_id}")
        note = self._notes[note_id].model_copy(
            update={
                "title": draft.title,
                "content": draft.content,
                "updated_at": datetime.now(timezone.utc),
            }
        )
        self._notes[note_id] = note
        return note

    def delete_note(self, note_id: str) -> None:
        if self._notes.pop(note_id, None) is None:
            raise NoteNotFoundError(f"Note not found: {note_id}")


def _created_sort_key(note: Note) -> datetime:
    # Naive timestamps are taken as UTC; notes without one sort last.
    created = note.created_at
    if created is None:
        return datetime.min.replace(tzinfo=timezone.utc)
    if created.tzinfo is None:
        return created.replace(tzinfo=timezone.utc)
    return created
