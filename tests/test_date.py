"""Tests for the CalendarDate value type."""

from dataclasses import FrozenInstanceError

import pytest

from tscal import BASE_TIMESTAMP, CalendarDate, DateInvalid, TimestampOutOfRange


def test_from_timestamp_and_back():
    """Test conversion in both directions through CalendarDate."""
    date = CalendarDate.from_timestamp(3981312000 + 3600)
    assert date == CalendarDate(2096, 2, 29)
    assert date.timestamp() == 3981312000


def test_from_timestamp_with_table_strategy():
    """Test that the lookup strategy gives the same date."""
    assert CalendarDate.from_timestamp(
        4107456000, strategy="table"
    ) == CalendarDate.from_timestamp(4107456000)


def test_from_timestamp_out_of_range():
    """Test that the forward window is enforced."""
    with pytest.raises(TimestampOutOfRange):
        CalendarDate.from_timestamp(BASE_TIMESTAMP - 1)


def test_construction_validates_fields():
    """Test that invalid fields are rejected at construction."""
    with pytest.raises(DateInvalid, match="before 2000-03-01"):
        CalendarDate(2000, 2, 1)
    with pytest.raises(DateInvalid, match="month must be between 1 and 12"):
        CalendarDate(2001, 13, 1)


def test_construction_is_coarse():
    """Test that nonexistent days pass the coarse checks."""
    assert CalendarDate(2001, 4, 31).timestamp() == CalendarDate(2001, 5, 1).timestamp()


def test_ordering_is_lexicographic():
    """Test that dates sort by year, then month, then day."""
    dates = [
        CalendarDate(2100, 1, 1),
        CalendarDate(2096, 12, 31),
        CalendarDate(2096, 2, 29),
        CalendarDate(2096, 3, 1),
    ]
    assert sorted(dates) == [
        CalendarDate(2096, 2, 29),
        CalendarDate(2096, 3, 1),
        CalendarDate(2096, 12, 31),
        CalendarDate(2100, 1, 1),
    ]


def test_unpacking_and_string():
    """Test tuple access, unpacking and the ISO-like string form."""
    date = CalendarDate(2396, 2, 29)
    year, month, day = date
    assert (year, month, day) == date.astuple() == (2396, 2, 29)
    assert str(date) == "2396-02-29"


def test_is_immutable():
    """Test that fields cannot be reassigned."""
    date = CalendarDate(2000, 3, 1)
    with pytest.raises(FrozenInstanceError):
        date.day = 2  # type: ignore[misc]
