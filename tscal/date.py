from collections.abc import Iterator
from dataclasses import dataclass

from tscal.convert import date_to_timestamp, timestamp_to_date
from tscal.day_of_year import DEFAULT_STRATEGY, Strategy
from tscal.guard import check_date


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A (year, month, day) value, ordered lexicographically.

    Construction applies the same coarse checks as date_to_timestamp.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        check_date(self.year, self.month, self.day)

    @classmethod
    def from_timestamp(
        cls, timestamp: int, *, strategy: Strategy = DEFAULT_STRATEGY
    ) -> "CalendarDate":
        return cls(*timestamp_to_date(timestamp, strategy=strategy))

    def timestamp(self) -> int:
        """Timestamp of this date's midnight (UTC)."""
        return date_to_timestamp(self.year, self.month, self.day)

    def astuple(self) -> tuple[int, int, int]:
        return self.year, self.month, self.day

    def __iter__(self) -> Iterator[int]:
        return iter(self.astuple())

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
