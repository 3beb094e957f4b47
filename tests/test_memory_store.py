"""Tests for the in-memory notes store."""

from datetime import datetime, timezone

import pytest

from calnotes.exceptions import NoteNotFoundError, TransientFetchError
from calnotes.models.note import Note, NoteDraft
from calnotes.store.memory_store import InMemoryNotesStore


def test_notes_sorted_newest_first_with_mixed_timestamps():
    store = InMemoryNotesStore(
        [
            Note(id="aware", date="2024-02-15", title="a", content="a",
                 created_at=datetime(2024, 2, 15, 9, 0, tzinfo=timezone.utc)),
            Note(id="naive", date="2024-02-15", title="b", content="b",
                 created_at=datetime(2024, 2, 15, 12, 0)),
            Note(id="undated", date="2024-02-15", title="c", content="c"),
        ]
    )

    notes = store.fetch_notes_for_date("2024-02-15")

    assert [n.id for n in notes] == ["naive", "aware", "undated"]


def test_fetch_all_note_dates_deduplicates(store):
    assert store.fetch_all_note_dates() == ["2024-02-15", "2024-03-02"]


def test_fail_fetches(store):
    store.fail_fetches = True
    with pytest.raises(TransientFetchError):
        store.fetch_all_note_dates()


def test_create_then_list(store):
    note = store.create_note("2024-02-20", NoteDraft.build("Dentiste", "14h"))
    assert note.date == "2024-02-20"
    assert note.created_at.tzinfo is not None
    assert store.fetch_notes_for_date("2024-02-20") == [note]


def test_update_and_delete_missing_note(store):
    with pytest.raises(NoteNotFoundError):
        store.update_note("missing", NoteDraft.build("t", "c"))
    with pytest.raises(NoteNotFoundError):
        store.delete_note("missing")
