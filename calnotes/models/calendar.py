"""Calendar grid and view state models."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, computed_field

from calnotes.dates import date_key


class CalendarDayCell(BaseModel):
    """One cell of the 6x7 month grid."""

    model_config = ConfigDict(frozen=True)

    date: date
    day_number: int = Field(ge=1, le=31)
    is_current_month: bool
    is_today: bool = False
    is_selected: bool = False
    has_notes: bool = False

    @computed_field
    @property
    def key(self) -> str:
        """Canonical date key of the cell."""
        return date_key(self.date)


class CalendarViewState(BaseModel):
    """Month on display and selected date.

    Immutable: navigation and selection return a new state.
    """

    model_config = ConfigDict(frozen=True)

    current_month: int = Field(ge=0, le=11)
    current_year: int
    selected_date: date

    @classmethod
    def for_today(cls, today: date | None = None) -> "CalendarViewState":
        """Initial state: month of today with today selected."""
        today = today or date.today()
        return cls(
            current_month=today.month - 1,
            current_year=today.year,
            selected_date=today,
        )


class DateSelected(BaseModel):
    """Notification returned when a date is selected."""

    model_config = ConfigDict(frozen=True)

    date_key: str
