import heapq
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from functools import reduce
from typing import Any, Generic, Literal, overload

from typing_extensions import override

from tscal.date import CalendarDate
from tscal.interval import IvlIn, IvlOut
from tscal.util import DAY


class Timeline(ABC, Generic[IvlOut]):

    @abstractmethod
    def fetch(self, start: int | None, end: int | None) -> Iterable[IvlOut]:
        """Yield intervals ordered by start/end within the provided bounds."""
        pass

    def __getitem__(self, item: slice) -> Iterable[IvlOut]:
        start = self._coerce_bound(item.start, "start")
        end = self._coerce_bound(item.stop, "end")
        return self.fetch(start, end)

    def _coerce_bound(self, bound: Any, edge: Literal["start", "end"]) -> int | None:
        """Convert slice bounds to integer seconds (Unix timestamps).

        Accepts:
        - int: Passed through as-is (Unix timestamp)
        - CalendarDate: First second of the day for start, last for end
        - None: Unbounded (passed through)

        Raises:
            TypeError: If bound is an unsupported type
        """
        if bound is None:
            return None
        if isinstance(bound, int) and not isinstance(bound, bool):
            return bound
        if isinstance(bound, CalendarDate):
            midnight = bound.timestamp()
            return midnight if edge == "start" else midnight + DAY - 1
        raise TypeError(
            f"Timeline slice {edge} bound must be int, CalendarDate, or None.\n"
            f"Got {type(bound).__name__!r}: {bound!r}\n"
            f"Examples:\n"
            f"  timeline[start_ts:end_ts]  # int (Unix seconds)\n"
            f"  timeline[CalendarDate(2096, 1, 1):CalendarDate(2096, 12, 31)]"
        )

    @overload
    def __or__(self, other: "Timeline[IvlOut]") -> "Timeline[IvlOut]": ...

    @overload
    def __or__(self, other: "Filter[Any]") -> "Timeline[IvlOut]": ...

    def __or__(self, other: "Timeline[IvlOut] | Filter[Any]") -> "Timeline[IvlOut]":
        if isinstance(other, Filter):
            raise TypeError(
                f"Cannot union (|) a Timeline with a Filter.\n"
                f"Got: Timeline | {type(other).__name__}\n"
                f"Hint: Use & to apply filters: calendar_days() & in_months(2)\n"
                f"      Use | to combine timelines: timeline_a | timeline_b"
            )
        return Union(self, other)

    def __and__(self, other: "Filter[IvlOut]") -> "Timeline[IvlOut]":
        if not isinstance(other, Filter):
            raise TypeError(
                f"Timelines can only be combined with a Filter using &.\n"
                f"Got: Timeline & {type(other).__name__}"
            )
        return Filtered(self, other)


class Filter(ABC, Generic[IvlIn]):
    """Predicate over intervals; combine with | and &, apply with timeline & f."""

    @abstractmethod
    def apply(self, event: IvlIn) -> bool:
        pass

    def __or__(self, other: "Filter[IvlIn]") -> "Filter[IvlIn]":
        if not isinstance(other, Filter):
            raise TypeError(
                f"Cannot union (|) a Filter with a {type(other).__name__}.\n"
                f"Hint: Use & to apply filters: calendar_days() & in_months(2)\n"
                f"      Use | to combine filters: in_months(1) | in_months(2)"
            )
        return _Combined(any, self, other)

    def __and__(
        self, other: "Filter[IvlIn] | Timeline[IvlIn]"
    ) -> "Filter[IvlIn] | Timeline[IvlIn]":
        if isinstance(other, Timeline):
            return Filtered(other, self)
        if not isinstance(other, Filter):
            raise TypeError(
                f"Cannot combine (&) a Filter with a {type(other).__name__}.\n"
                f"Expected another Filter or a Timeline"
            )
        return _Combined(all, self, other)


class _Combined(Filter[IvlIn]):
    """Filters joined by `any` (for |) or `all` (for &)."""

    def __init__(
        self, combine: Callable[[Iterable[bool]], bool], *filters: Filter[IvlIn]
    ):
        self.combine: Callable[[Iterable[bool]], bool] = combine
        self.filters: tuple[Filter[IvlIn], ...] = filters

    @override
    def apply(self, event: IvlIn) -> bool:
        return self.combine(f.apply(event) for f in self.filters)


class Union(Timeline[IvlOut]):
    """Sorted merge of several timelines."""

    def __init__(self, *sources: Timeline[IvlOut]):
        self.sources: tuple[Timeline[IvlOut], ...] = sources

    @override
    def fetch(self, start: int | None, end: int | None) -> Iterable[IvlOut]:
        return heapq.merge(
            *(source.fetch(start, end) for source in self.sources),
            key=lambda e: (e.start, e.end),
        )


class Filtered(Timeline[IvlOut]):
    def __init__(self, source: Timeline[IvlOut], predicate: "Filter[IvlOut]"):
        self.source: Timeline[IvlOut] = source
        self.predicate: Filter[IvlOut] = predicate

    @override
    def fetch(self, start: int | None, end: int | None) -> Iterable[IvlOut]:
        keep = self.predicate.apply
        return (e for e in self.source.fetch(start, end) if keep(e))


def union(*timelines: "Timeline[IvlOut]") -> "Timeline[IvlOut]":
    """Compose timelines with union semantics (equivalent to chaining `|`)."""

    if not timelines:
        raise ValueError(
            f"union() requires at least one timeline argument.\n"
            f"Example: union(calendar_days(), calendar_months())"
        )

    def reducer(acc: "Timeline[IvlOut]", nxt: "Timeline[IvlOut]"):
        return acc | nxt

    return reduce(reducer, timelines)
