"""Note models with Pydantic v2 validation."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ValidationError, field_validator

from calnotes.constants import EMPTY_NOTE_MESSAGE
from calnotes.dates import coerce_date, date_key
from calnotes.exceptions import InvalidInputError


def _canonical_key(v):
    """Normalize a date field to its canonical key string."""
    if isinstance(v, (date, datetime, str)):
        try:
            return date_key(coerce_date(v))
        except InvalidInputError as e:
            raise ValueError(str(e))
    raise ValueError(f"Invalid date: {v!r}")


class Note(BaseModel):
    """A note row as stored in the notes table."""

    id: Optional[str] = None
    date: str
    title: str
    content: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("id", mode="before")
    @classmethod
    def convert_id(cls, v):
        """Store ids may be integers or uuids; keep them as strings."""
        if v is None:
            return None
        return str(v)

    @field_validator("date", mode="before")
    @classmethod
    def convert_date(cls, v):
        """Convert date values to the canonical key."""
        return _canonical_key(v)


class NoteDraft(BaseModel):
    """Title and content entered for a new or edited note."""

    title: str
    content: str

    @field_validator("title", "content", mode="before")
    @classmethod
    def strip_text(cls, v):
        if v is None:
            return ""
        return v.strip() if isinstance(v, str) else v

    @classmethod
    def build(cls, title: str | None, content: str | None) -> "NoteDraft":
        """
        Build a draft, rejecting blank title or content.

        Raises:
            InvalidInputError: If the title or the content is blank
        """
        try:
            draft = cls(title=title or "", content=content or "")
        except ValidationError:
            raise InvalidInputError(EMPTY_NOTE_MESSAGE)
        if not draft.title or not draft.content:
            raise InvalidInputError(EMPTY_NOTE_MESSAGE)
        return draft

    def for_date(self, day) -> dict:
        """Row payload for inserting this draft on a date."""
        return {
            "date": date_key(coerce_date(day)),
            "title": self.title,
            "content": self.content,
        }
