from dataclasses import dataclass
from typing import TypeVar

from tscal.convert import timestamp_to_date
from tscal.guard import is_valid_timestamp


def _label(ts: int) -> str:
    if is_valid_timestamp(ts):
        year, month, day = timestamp_to_date(ts)
        return f"{year:04d}-{month:02d}-{day:02d}"
    return str(ts)


@dataclass(frozen=True, kw_only=True)
class Interval:
    """Inclusive span of whole seconds."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"Interval start ({self.start}) must be <= end ({self.end})"
            )

    @property
    def duration(self) -> int:
        return self.end - self.start + 1

    def __str__(self) -> str:
        """Human-friendly string showing calendar range and duration."""
        return f"Interval({_label(self.start)}→{_label(self.end)}, {self.duration}s)"


IvlOut = TypeVar("IvlOut", bound="Interval", covariant=True)
IvlIn = TypeVar("IvlIn", bound="Interval", contravariant=True)
