"""Range and validation checks shared by both converters."""

import logging
from typing import Any

from tscal.errors import DateInvalid, TimestampOutOfRange
from tscal.util import BASE_TIMESTAMP, BASE_YEAR, LAST_TIMESTAMP

logger = logging.getLogger(__name__)


def _require_int(name: str, value: Any) -> None:
    """Reject anything that is not a plain integer (bools included)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"{name} must be an int.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Hint: convert explicitly, e.g. int(ts) for a float timestamp"
        )


def _date_problem(year: int, month: int, day: int) -> str | None:
    """Return a description of the first failed check, or None."""
    if year < BASE_YEAR:
        return f"year must be >= {BASE_YEAR}"
    if month < 1 or month > 12:
        return "month must be between 1 and 12"
    if day < 1 or day > 31:
        return "day must be between 1 and 31"
    if year == BASE_YEAR and month < 3:
        return f"dates before {BASE_YEAR}-03-01 are not supported"
    return None


def is_valid_timestamp(timestamp: int) -> bool:
    _require_int("timestamp", timestamp)
    return BASE_TIMESTAMP <= timestamp <= LAST_TIMESTAMP


def is_valid_date(year: int, month: int, day: int) -> bool:
    """True if the fields pass the coarse range and anchor checks.

    The check is shallow on purpose: it does not know how many days a
    month has, so (2001, 4, 31) and (2001, 2, 30) are accepted.
    """
    for name, value in (("year", year), ("month", month), ("day", day)):
        _require_int(name, value)
    return _date_problem(year, month, day) is None


def check_timestamp(timestamp: int) -> None:
    """Raise TimestampOutOfRange unless the timestamp is convertible."""
    if not is_valid_timestamp(timestamp):
        logger.debug("Rejected timestamp %d", timestamp)
        raise TimestampOutOfRange(timestamp)


def check_date(year: int, month: int, day: int) -> None:
    """Raise DateInvalid if the fields fail the coarse checks."""
    for name, value in (("year", year), ("month", month), ("day", day)):
        _require_int(name, value)
    problem = _date_problem(year, month, day)
    if problem is not None:
        logger.debug("Rejected date (%d, %d, %d): %s", year, month, day, problem)
        raise DateInvalid(year, month, day, problem)


__all__ = [
    "check_timestamp",
    "check_date",
    "is_valid_timestamp",
    "is_valid_date",
]
