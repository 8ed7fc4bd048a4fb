"""Calendar-aligned period timelines.

These timelines slice a query range into one interval per calendar day or
calendar month. Boundaries come from the integer conversion engine, so no
datetime arithmetic is involved and the supported window is the engine's
own: [2000-03-01, 2399-12-31].
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

from typing_extensions import override

from tscal.convert import date_to_timestamp, midnight, timestamp_to_date
from tscal.core import Filter, Timeline
from tscal.date import CalendarDate
from tscal.interval import Interval
from tscal.util import BASE_TIMESTAMP, DAY, LAST_TIMESTAMP


@dataclass(frozen=True, kw_only=True)
class Period(Interval):
    """Interval covering (part of) one calendar day or month.

    Attributes:
        date: First calendar day of the period
        unit: "day" or "month"
    """

    date: CalendarDate
    unit: Literal["day", "month"]


class _CalendarPeriods(Timeline[Period]):
    """Base class for timelines that emit one interval per calendar period."""

    def _periods(self, lo: int, hi: int) -> Iterable[Period]:
        """Yield periods overlapping [lo, hi], already inside the window."""
        raise NotImplementedError

    @override
    def fetch(self, start: int | None, end: int | None) -> Iterable[Period]:
        if start is None or end is None:
            raise ValueError(
                f"{self.__class__.__name__} requires finite start and end bounds"
            )

        lo = max(start, BASE_TIMESTAMP)
        hi = min(end, LAST_TIMESTAMP)
        if lo > hi:
            return

        yield from self._periods(lo, hi)


class CalendarDays(_CalendarPeriods):
    """One interval per calendar day."""

    @override
    def _periods(self, lo: int, hi: int) -> Iterable[Period]:
        cursor = midnight(lo)
        while cursor <= hi:
            yield Period(
                start=max(cursor, lo),
                end=min(cursor + DAY - 1, hi),
                date=CalendarDate.from_timestamp(cursor),
                unit="day",
            )
            cursor += DAY


class CalendarMonths(_CalendarPeriods):
    """One interval per calendar month."""

    @override
    def _periods(self, lo: int, hi: int) -> Iterable[Period]:
        year, month, _ = timestamp_to_date(lo)
        month_start = date_to_timestamp(year, month, 1)

        while month_start <= hi:
            next_year, next_month = (year + 1, 1) if month == 12 else (year, month + 1)
            # The inverse converter has no upper bound, so 2400-01-01 resolves
            next_start = date_to_timestamp(next_year, next_month, 1)

            yield Period(
                start=max(month_start, lo),
                end=min(next_start - 1, hi),
                date=CalendarDate(year, month, 1),
                unit="month",
            )
            year, month, month_start = next_year, next_month, next_start


class InMonths(Filter[Period]):
    """Keep periods whose first day falls in one of the given months."""

    def __init__(self, months: Iterable[int]):
        self.months: frozenset[int] = frozenset(months)
        for month in self.months:
            if not 1 <= month <= 12:
                raise ValueError(f"month must be between 1 and 12, got {month}")

    @override
    def apply(self, event: Period) -> bool:
        return event.date.month in self.months


def calendar_days() -> Timeline[Period]:
    """
    Return a timeline yielding one interval per calendar day.

    Returns:
        Timeline of Period objects, clamped to the query bounds

    Example:
        >>> from tscal import calendar_days, CalendarDate
        >>> days = list(calendar_days()[CalendarDate(2096, 2, 28):CalendarDate(2096, 3, 1)])
        >>> [str(d.date) for d in days]
        ['2096-02-28', '2096-02-29', '2096-03-01']
    """
    return CalendarDays()


def calendar_months() -> Timeline[Period]:
    """
    Return a timeline yielding one interval per calendar month.

    Example:
        >>> from tscal import calendar_months, in_months
        >>> februaries = calendar_months() & in_months(2)
    """
    return CalendarMonths()


def in_months(*months: int) -> Filter[Period]:
    return InMonths(months)
