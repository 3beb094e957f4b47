"""Notes store implementations."""

from calnotes.config import NotesConfig
from calnotes.store.base import NotesStore
from calnotes.store.memory_store import InMemoryNotesStore
from calnotes.store.supabase_store import SupabaseNotesStore


def create_store(config: NotesConfig) -> NotesStore:
    """Build the remote store described by the configuration."""
    return SupabaseNotesStore(
        config.supabase_url,
        config.supabase_key,
        table=config.notes_table,
        timeout=config.request_timeout,
    )


__all__ = [
    "NotesStore",
    "InMemoryNotesStore",
    "SupabaseNotesStore",
    "create_store",
]
