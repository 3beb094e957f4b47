"""Base protocol for notes stores."""

from typing import List, Protocol

from calnotes.models.note import Note, NoteDraft


class NotesStore(Protocol):
    """Protocol for the remote notes table."""

    def fetch_all_note_dates(self) -> List[str]:
        """
        Get every distinct date that has at least one note.

        Raises:
            TransientFetchError: If the store could not be read
        """
        ...

    def fetch_notes_for_date(self, date_key: str) -> List[Note]:
        """Get the notes of one date, newest first."""
        ...

    def create_note(self, date_key: str, draft: NoteDraft) -> Note:
        """Insert a note on a date and return the stored row."""
        ...

    def update_note(self, note_id: str, draft: NoteDraft) -> Note:
        """Replace title and content of a note and return the stored row."""
        ...

    def delete_note(self, note_id: str) -> None:
        """Delete a note."""
        ...
