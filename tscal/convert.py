"""Conversion between Unix timestamps and Gregorian calendar dates.

Both directions use integer arithmetic only. Days are counted from the
anchor 2000-03-01 and decomposed into centuries, four-year tetrads and
years of a March-based calendar, which keeps the leap day at the end of
each internal year.

Example:
    >>> from tscal import timestamp_to_date, date_to_timestamp
    >>> timestamp_to_date(3981312000)
    (2096, 2, 29)
    >>> date_to_timestamp(2000, 3, 1)
    951868800
"""

from tscal.day_of_year import (
    DEFAULT_STRATEGY,
    Strategy,
    day_of_year_formula,
    month_day,
)
from tscal.guard import check_date, check_timestamp
from tscal.util import (
    BASE_TIMESTAMP,
    BASE_YEAR,
    DAYS_PER_4_YEARS,
    DAYS_PER_100_YEARS,
    DAYS_PER_YEAR,
    SECONDS_PER_DAY,
)


def timestamp_to_date(
    timestamp: int, *, strategy: Strategy = DEFAULT_STRATEGY
) -> tuple[int, int, int]:
    """Convert a Unix timestamp to a (year, month, day) triple.

    Args:
        timestamp: Seconds since the Unix epoch, within
            [BASE_TIMESTAMP, LAST_TIMESTAMP]
        strategy: Day-of-year mapping to use ("formula" or "table")

    Returns:
        (year, month, day) with month in 1..12 and day in 1..31

    Raises:
        TimestampOutOfRange: If the timestamp is outside the window
    """
    check_timestamp(timestamp)

    elapsed_days = (timestamp - BASE_TIMESTAMP) // SECONDS_PER_DAY
    centuries, elapsed_days = divmod(elapsed_days, DAYS_PER_100_YEARS)
    tetrads, elapsed_days = divmod(elapsed_days, DAYS_PER_4_YEARS)

    # The leap day of a tetrad would otherwise read as day 0 of a fifth year
    year_in_tetrad = min(elapsed_days // DAYS_PER_YEAR, 3)
    day_of_year = elapsed_days - year_in_tetrad * DAYS_PER_YEAR

    year = BASE_YEAR + 100 * centuries + 4 * tetrads + year_in_tetrad
    month, day = month_day(day_of_year, strategy)

    # January and February belong to the next calendar year
    if month > 12:
        month -= 12
        year += 1

    return year, month, day


def date_to_timestamp(year: int, month: int, day: int) -> int:
    """Convert a calendar date to the timestamp of its midnight (UTC).

    Validation is coarse: the day is only checked against 1..31, so
    nonexistent dates such as (2001, 4, 31) yield the timestamp of the
    following real day. There is no upper bound on the year.

    Raises:
        DateInvalid: If year < 2000, month/day are out of range, or the
            date precedes 2000-03-01
    """
    check_date(year, month, day)

    if month < 3:
        year -= 1
        month += 12

    full_years = year - BASE_YEAR
    days_of_full_years = (
        full_years * DAYS_PER_YEAR
        + full_years // 4
        - full_years // 100
        + full_years // 400
    )
    day_of_year = day_of_year_formula(month, day)

    return (days_of_full_years + day_of_year - 1) * SECONDS_PER_DAY + BASE_TIMESTAMP


def midnight(timestamp: int) -> int:
    """Floor an in-range timestamp to the start of its day."""
    check_timestamp(timestamp)
    return timestamp - (timestamp - BASE_TIMESTAMP) % SECONDS_PER_DAY


__all__ = ["timestamp_to_date", "date_to_timestamp", "midnight"]
