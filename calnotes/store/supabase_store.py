"""Notes store backed by a Supabase (PostgREST) table."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import requests

from calnotes.dates import coerce_date, date_key
from calnotes.exceptions import (
    NoteNotFoundError,
    NotesStoreError,
    StoreConfigurationError,
    TransientFetchError,
)
from calnotes.models.note import Note, NoteDraft

logger = logging.getLogger(__name__)


class SupabaseNotesStore:
    """Notes store talking to the PostgREST endpoint of a Supabase project.

    Rows live in one table with ``id``, ``date``, ``title``, ``content``,
    ``created_at`` and ``updated_at`` columns.
    """

    def __init__(
        self,
        url: Optional[str],
        key: Optional[str],
        table: str = "notes",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize store.

        Args:
            url: Project URL (e.g. https://xyz.supabase.co)
            key: Anonymous API key
            table: Notes table name
            timeout: Per-request timeout in seconds
            session: Optional requests session (dependency injection)

        Raises:
            StoreConfigurationError: If the URL or the key is missing
        """
        if not url or not key:
            raise StoreConfigurationError(
                "Notes store not configured. Set SUPABASE_URL and SUPABASE_ANON_KEY."
            )
        self.base_url = f"{url.rstrip('/')}/rest/v1/{table}"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {
            "apikey": key,
            "Authorization": f"Bearer {key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _make_request(
        self,
        method: str,
        params: Optional[Dict[str, str]] = None,
        json: Any = None,
        prefer: Optional[str] = None,
    ) -> Any:
        """Make API request and map failures onto store exceptions."""
        headers = dict(self.headers)
        if prefer:
            headers["Prefer"] = prefer

        logger.debug(f"{method} {self.base_url} params={params}")
        try:
            response = self.session.request(
                method,
                self.base_url,
                params=params,
                json=json,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout:
            logger.error("Notes store request timed out")
            raise TransientFetchError("Request timed out")
        except requests.exceptions.ConnectionError:
            logger.error("Unable to connect to notes store")
            raise TransientFetchError("Unable to connect to notes store")
        except requests.exceptions.RequestException as e:
            logger.error(f"Notes store request error: {e}")
            raise TransientFetchError(f"Network error: {e}")

        status = response.status_code
        if status >= 500 or status == 429:
            logger.error(f"Notes store error {status}: {response.text}")
            raise TransientFetchError(f"Notes store unavailable: {status}")
        if status in (401, 403):
            logger.error("Notes store rejected the API key")
            raise NotesStoreError(f"Notes store rejected credentials: {status}")
        if status >= 400:
            logger.error(f"Notes store error {status}: {response.text}")
            raise NotesStoreError(f"Notes store request failed: {status}")

        if status == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            raise NotesStoreError("Notes store returned invalid JSON")

    def fetch_all_note_dates(self) -> List[str]:
        """Get every distinct note date, in first-seen order."""
        rows = self._make_request("GET", params={"select": "date"}) or []
        seen = {}
        for row in rows:
            value = row.get("date")
            if value:
                seen.setdefault(value, None)
        return list(seen)

    def fetch_notes_for_date(self, key: str) -> List[Note]:
        """Get the notes of a date, newest first."""
        rows = self._make_request(
            "GET",
            params={
                "select": "*",
                "date": f"eq.{date_key(coerce_date(key))}",
                "order": "created_at.desc",
            },
        )
        return [Note.model_validate(row) for row in rows or []]

    def create_note(self, day: str, draft: NoteDraft) -> Note:
        rows = self._make_request(
            "POST", json=[draft.for_date(day)], prefer="return=representation"
        )
        if not rows:
            raise NotesStoreError("Notes store returned no row for created note")
        note = Note.model_validate(rows[0])
        logger.info(f"Created note {note.id} on {note.date}")
        return note

    def update_note(self, note_id: str, draft: NoteDraft) -> Note:
        rows = self._make_request(
            "PATCH",
            params={"id": f"eq.{note_id}"},
            json={
                "title": draft.title,
                "content": draft.content,
                "updated_at": datetime.now(timezone.utc).isoformat(),
            },
            prefer="return=representation",
        )
        if not rows:
            raise NoteNotFoundError(f"Note not found: {note_id}")
        logger.info(f"Updated note {note_id}")
        return Note.model_validate(rows[0])

    def delete_note(self, note_id: str) -> None:
        rows = self._make_request(
            "DELETE",
            params={"id": f"eq.{note_id}"},
            prefer="return=representation",
        )
        if not rows:
            raise NoteNotFoundError(f"Note not found: {note_id}")
        logger.info(f"Deleted note {note_id}")
