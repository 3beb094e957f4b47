"""Exception hierarchy for calendar note operations."""


class NotesError(Exception):
    """Base exception for calendar note operations."""

    pass


class InvalidInputError(NotesError):
    """Malformed date, month or note content."""

    pass


class NotesStoreError(NotesError):
    """Base exception for notes store operations."""

    pass


class TransientFetchError(NotesStoreError):
    """Notes store could not be reached or returned a server error."""

    pass


class NoteNotFoundError(NotesStoreError):
    """Note id matched no row in the store."""

    pass


class StoreConfigurationError(NotesStoreError):
    """Notes store URL or key missing."""

    pass
