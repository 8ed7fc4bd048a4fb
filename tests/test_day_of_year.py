"""Tests for the March-based day-of-year mapping."""

import pytest

from tscal.day_of_year import (
    DAY_BY_DAY_OF_YEAR,
    MONTH_BY_DAY_OF_YEAR,
    day_of_year_formula,
    month_day,
    month_day_formula,
    month_day_table,
)

# Days per March-based month, March through the following (leap) February
_MONTH_LENGTHS = (31, 30, 31, 30, 31, 31, 30, 31, 30, 31, 31, 29)


def test_tables_have_one_entry_per_day():
    """Test that both tables cover offsets 0 through 365."""
    assert len(MONTH_BY_DAY_OF_YEAR) == 366
    assert len(DAY_BY_DAY_OF_YEAR) == 366


def test_strategies_agree_on_every_offset():
    """Test that formula and table agree for every offset."""
    for doy in range(366):
        assert month_day_formula(doy) == month_day_table(doy)
        assert month_day(doy, "formula") == month_day(doy, "table")


def test_mapping_walks_month_lengths():
    """Test that the mapping enumerates March through February in order."""
    expected = [
        (month, day)
        for month, length in zip(range(3, 15), _MONTH_LENGTHS)
        for day in range(1, length + 1)
    ]
    assert [month_day(doy) for doy in range(366)] == expected


@pytest.mark.parametrize(
    "doy, expected",
    [(0, (3, 1)), (30, (3, 31)), (31, (4, 1)), (305, (12, 31)), (306, (13, 1)), (365, (14, 29))],
)
def test_month_day_edges(doy, expected):
    """Test month edges including the leap day at the end of the year."""
    assert month_day(doy) == expected


def test_inverse_formula_is_one_based():
    """Test that the inverse formula yields offset + 1 for every mapped day."""
    for doy in range(366):
        month, day = month_day(doy)
        assert day_of_year_formula(month, day) == doy + 1


@pytest.mark.parametrize("doy", [-1, 366])
def test_month_day_rejects_out_of_range(doy):
    """Test that offsets outside 0..365 are rejected."""
    with pytest.raises(ValueError, match="between 0 and 365"):
        month_day(doy)


def test_month_day_rejects_unknown_strategy():
    """Test that an unknown strategy name lists the valid ones."""
    with pytest.raises(ValueError, match="Invalid strategy 'lookup'"):
        month_day(0, "lookup")  # type: ignore[arg-type]
