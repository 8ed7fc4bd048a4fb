"""Tests for the boolean validity checks."""

import pytest

from tscal import BASE_TIMESTAMP, LAST_TIMESTAMP, is_valid_date, is_valid_timestamp


@pytest.mark.parametrize(
    "timestamp, expected",
    [
        (BASE_TIMESTAMP, True),
        (LAST_TIMESTAMP, True),
        (BASE_TIMESTAMP - 1, False),
        (LAST_TIMESTAMP + 1, False),
        (0, False),
    ],
)
def test_is_valid_timestamp_boundaries(timestamp, expected):
    """Test that both window edges are inclusive."""
    assert is_valid_timestamp(timestamp) is expected


@pytest.mark.parametrize(
    "date, expected",
    [
        ((2000, 3, 1), True),
        ((2399, 12, 31), True),
        ((2001, 4, 31), True),
        ((2001, 2, 30), True),
        ((2000, 2, 29), False),
        ((1999, 12, 31), False),
        ((2001, 0, 1), False),
        ((2001, 13, 1), False),
        ((2001, 1, 0), False),
        ((2001, 1, 32), False),
    ],
)
def test_is_valid_date(date, expected):
    """Test the coarse checks, including days that do not exist in their month."""
    assert is_valid_date(*date) is expected


def test_is_valid_timestamp_rejects_non_int():
    """Test that bool and float timestamps raise TypeError."""
    with pytest.raises(TypeError, match="timestamp must be an int"):
        is_valid_timestamp(True)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="timestamp must be an int"):
        is_valid_timestamp(951868800.0)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "date, field",
    [((2001.0, 3, 1), "year"), ((2001, True, 1), "month"), ((2001, 3, 1.5), "day")],
)
def test_is_valid_date_rejects_non_int(date, field):
    """Test that each field is type-checked."""
    with pytest.raises(TypeError, match=f"{field} must be an int"):
        is_valid_date(*date)
