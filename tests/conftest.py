from datetime import date, datetime, timezone

import pytest

from calnotes import create_app
from calnotes.config import NotesConfig
from calnotes.models.note import Note
from calnotes.store.memory_store import InMemoryNotesStore

TODAY = date(2024, 2, 15)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def store():
    """In-memory store seeded with notes on two dates."""
    return InMemoryNotesStore(
        [
            Note(
                id="n1",
                date="2024-02-15",
                title="Réunion",
                content="Point d'équipe",
                created_at=datetime(2024, 2, 15, 9, 0, tzinfo=timezone.utc),
            ),
            Note(
                id="n2",
                date="2024-02-15",
                title="Courses",
                content="Pain, lait",
                created_at=datetime(2024, 2, 15, 18, 30, tzinfo=timezone.utc),
            ),
            Note(
                id="n3",
                date="2024-03-02",
                title="Anniversaire",
                content="Appeler Sam",
                created_at=datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc),
            ),
        ]
    )


@pytest.fixture
def app(store):
    """Create and configure a Flask app for testing."""
    app = create_app(store=store, config=NotesConfig(), today=lambda: TODAY)
    app.config.update({"TESTING": True})
    return app


@pytest.fixture
def client(app):
    """Create a test client for the app."""
    return app.test_client()
