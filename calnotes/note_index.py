"""Index of dates that have at least one note."""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from calnotes.dates import coerce_date, date_key
from calnotes.exceptions import InvalidInputError, NotesStoreError
from calnotes.store.base import NotesStore

logger = logging.getLogger(__name__)


class NoteDateIndex:
    """Immutable set of canonical date keys.

    A refresh builds a new index from the store; the owner swaps it in
    whole, so readers never see a partially filled set.
    """

    def __init__(self, keys: Iterable[str] = ()):
        """
        Initialize index.

        Args:
            keys: Dates or date keys; each is canonicalized, duplicates collapse
        """
        self._keys = frozenset(date_key(coerce_date(k)) for k in keys)

    @classmethod
    def empty(cls) -> "NoteDateIndex":
        return cls()

    @classmethod
    def from_store(cls, store: NotesStore) -> "NoteDateIndex":
        """
        Build an index from every note date in the store.

        Raises:
            NotesStoreError: If the store could not be read
        """
        dates = store.fetch_all_note_dates()
        keys = []
        for value in dates:
            try:
                keys.append(date_key(coerce_date(value)))
            except InvalidInputError:
                logger.warning(f"Ignoring malformed note date from store: {value!r}")
        return cls(keys)

    def refresh(self, store: NotesStore) -> "RefreshResult":
        """
        Fetch a replacement index from the store.

        If the store cannot be read this index is kept as is and the failure
        is reported in the result.

        Args:
            store: Notes store to read note dates from

        Returns:
            RefreshResult holding the index to use next
        """
        try:
            index = NoteDateIndex.from_store(store)
        except NotesStoreError as e:
            logger.warning(f"Note date refresh failed, keeping previous index: {e}")
            return RefreshResult(index=self, ok=False, error=str(e))
        logger.debug(f"Note date index refreshed: {len(index)} dates")
        return RefreshResult(index=index, ok=True)

    def has(self, value) -> bool:
        """Canonical-key membership test for a date or date key."""
        if isinstance(value, str) and value in self._keys:
            return True
        try:
            return date_key(coerce_date(value)) in self._keys
        except InvalidInputError:
            return False

    def __contains__(self, value) -> bool:
        return self.has(value)

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self):
        return iter(sorted(self._keys))

    def __eq__(self, other) -> bool:
        if not isinstance(other, NoteDateIndex):
            return NotImplemented
        return self._keys == other._keys

    def __hash__(self) -> int:
        return hash(self._keys)

    def __repr__(self) -> str:
        return f"NoteDateIndex({sorted(self._keys)!r})"


@dataclass(frozen=True)
class RefreshResult:
    """Outcome of an index refresh."""

    index: NoteDateIndex
    ok: bool
    error: Optional[str] = None
