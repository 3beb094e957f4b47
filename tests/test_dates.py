"""Tests for date keys and French labels."""

from datetime import date, datetime, timedelta, timezone

import pytest

from calnotes.dates import (
    coerce_date,
    date_key,
    days_in_month,
    format_date_fr,
    format_time_fr,
    month_name,
    parse_date_key,
)
from calnotes.exceptions import InvalidInputError


def test_date_key_is_zero_padded():
    assert date_key(date(2024, 1, 5)) == "2024-01-05"
    assert date_key(date(987, 12, 31)) == "0987-12-31"


def test_date_key_uses_local_fields_of_datetime():
    """A late-evening datetime with an offset keeps its own calendar day."""
    late = datetime(2024, 3, 9, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    assert date_key(late) == "2024-03-09"


def test_date_key_round_trip():
    start = date(2023, 12, 25)
    for offset in range(0, 800, 7):
        day = start + timedelta(days=offset)
        key = date_key(day)
        assert parse_date_key(key) == day
        assert date_key(parse_date_key(key)) == key


@pytest.mark.parametrize("bad", ["2024-02-30", "2024-13-01", "15/02/2024", "", "hier"])
def test_parse_date_key_rejects_malformed(bad):
    with pytest.raises(InvalidInputError):
        parse_date_key(bad)


def test_coerce_date():
    assert coerce_date("2024-02-15") == date(2024, 2, 15)
    assert coerce_date(datetime(2024, 2, 15, 8, 0)) == date(2024, 2, 15)
    with pytest.raises(InvalidInputError):
        coerce_date(20240215)
    with pytest.raises(InvalidInputError):
        coerce_date(None)


def test_days_in_month_uses_zero_based_months():
    assert days_in_month(2024, 1) == 29
    assert days_in_month(2023, 1) == 28
    assert days_in_month(1900, 1) == 28
    assert days_in_month(2000, 1) == 29
    assert days_in_month(2024, 11) == 31


def test_month_name():
    assert month_name(0) == "Janvier"
    assert month_name(7) == "Août"
    with pytest.raises(InvalidInputError):
        month_name(12)


def test_format_date_fr():
    assert format_date_fr("2024-01-15") == "lundi 15 janvier 2024"
    assert format_date_fr(date(2024, 2, 18)) == "dimanche 18 février 2024"
    assert format_date_fr("") == ""


def test_format_time_fr():
    assert format_time_fr(datetime(2024, 2, 15, 14, 5)) == "14:05"
    assert format_time_fr(None) == ""
    assert format_time_fr("not a timestamp") == ""


def test_format_time_fr_converts_to_local_time():
    stamp = datetime(2024, 2, 15, 14, 5, tzinfo=timezone.utc)
    expected = stamp.astimezone().strftime("%H:%M")
    assert format_time_fr(stamp.isoformat()) == expected
    assert format_time_fr("2024-02-15T14:05:00Z") == expected
