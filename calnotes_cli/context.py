"""Shared CLI context with lazy-initialized dependencies."""

from calnotes.calendar_session import CalendarSession
from calnotes.config import NotesConfig
from calnotes.notes_service import NotesService
from calnotes.store import create_store
from calnotes.store.base import NotesStore


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        notes = ctx.service.list_for_date("2024-02-15")
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: NotesConfig | None = None
        self._store: NotesStore | None = None
        self._session: CalendarSession | None = None
        self._service: NotesService | None = None

    @property
    def config(self) -> NotesConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = NotesConfig.from_env()
        return self._config

    @property
    def store(self) -> NotesStore:
        """Get notes store (lazy-loaded)."""
        if self._store is None:
            self._store = create_store(self.config)
        return self._store

    @property
    def session(self) -> CalendarSession:
        """Get calendar session with a freshly loaded index (lazy-loaded)."""
        if self._session is None:
            self._session = CalendarSession(self.store)
            self._session.refresh()
        return self._session

    @property
    def service(self) -> NotesService:
        """Get notes service (lazy-loaded)."""
        if self._service is None:
            self._service = NotesService(self.session)
        return self._service


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context."""
    global _ctx
    _ctx = ctx
