"""Date helpers: canonical date keys, month arithmetic and French labels."""

import calendar
from datetime import date, datetime

from calnotes.constants import DATE_KEY_FORMAT, MONTH_NAMES, WEEKDAY_NAMES_LONG
from calnotes.exceptions import InvalidInputError


def date_key(value: date) -> str:
    """
    Format a date as its canonical key.

    The key is built from the local calendar fields of the value, so a
    ``datetime`` late in the evening keeps its own day instead of rolling
    over through a UTC conversion.

    Args:
        value: date or datetime to format

    Returns:
        Key in ``YYYY-MM-DD`` form, zero-padded
    """
    if isinstance(value, datetime):
        value = value.date()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_date_key(key: str) -> date:
    """
    Parse a canonical ``YYYY-MM-DD`` key back into a date.

    Raises:
        InvalidInputError: If the key is not a valid calendar date
    """
    if not isinstance(key, str):
        raise InvalidInputError(f"Invalid date key: {key!r}")
    try:
        return datetime.strptime(key.strip(), DATE_KEY_FORMAT).date()
    except ValueError:
        raise InvalidInputError(f"Invalid date key: {key!r}. Use YYYY-MM-DD.")


def coerce_date(value) -> date:
    """Accept a date, datetime or canonical key and return a plain date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_date_key(value)
    raise InvalidInputError(f"Invalid date: {value!r}")


def days_in_month(year: int, month: int) -> int:
    """Number of days in a zero-based month (0 = January)."""
    return calendar.monthrange(year, month + 1)[1]


def monday_offset(value: date) -> int:
    """Weekday index with Monday as 0 and Sunday as 6."""
    return value.weekday()


def validate_month(month: int) -> int:
    """Check a zero-based month index."""
    if isinstance(month, bool) or not isinstance(month, int) or not 0 <= month <= 11:
        raise InvalidInputError(f"Invalid month: {month!r}. Expected 0-11.")
    return month


def month_name(month: int) -> str:
    """French month name for a zero-based month index."""
    return MONTH_NAMES[validate_month(month)]


def format_date_fr(value) -> str:
    """
    Long French date label, e.g. ``lundi 15 janvier 2024``.

    Args:
        value: date, datetime or canonical key

    Returns:
        Formatted label, or an empty string for an empty value
    """
    if value is None or value == "":
        return ""
    day = coerce_date(value)
    weekday = WEEKDAY_NAMES_LONG[day.weekday()]
    month = MONTH_NAMES[day.month - 1].lower()
    return f"{weekday} {day.day} {month} {day.year}"


def format_time_fr(timestamp) -> str:
    """
    Hour and minute of a timestamp in local time (``HH:MM``).

    Args:
        timestamp: ISO-8601 string or datetime, as returned by the store

    Returns:
        Formatted time, or an empty string when the timestamp is missing
        or unparseable
    """
    if not timestamp:
        return ""
    if isinstance(timestamp, str):
        try:
            timestamp = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
        except ValueError:
            return ""
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone()
    return timestamp.strftime("%H:%M")
