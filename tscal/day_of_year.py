"""Day-of-year mapping for March-based years.

A March-based year starts on March 1 and ends on the last day of the
following February, so the leap day is always the final day (offset 365).
Months are numbered 3..14 here; 13 and 14 are January and February of the
next calendar year.

Two strategies produce identical results:

- "formula": closed-form integer arithmetic.
- "table": direct lookup in two 366-entry tuples generated from the formula.
"""

from typing import Literal, TypeAlias

Strategy: TypeAlias = Literal["formula", "table"]

DEFAULT_STRATEGY: Strategy = "formula"
STRATEGIES: tuple[Strategy, ...] = ("formula", "table")

LAST_DAY_OF_YEAR = 365


def days_before_month(month: int) -> int:
    """Days between March 1 and the first of a March-based month (3..14)."""
    return (153 * (month - 3) + 2) // 5


def month_day_formula(day_of_year: int) -> tuple[int, int]:
    month = (day_of_year * 5 + 2) // 153 + 3
    day = day_of_year - days_before_month(month) + 1
    return month, day


def day_of_year_formula(month: int, day: int) -> int:
    """Inverse mapping: March-based month (3..14) and day to a day count.

    The result is one-based (March 1 gives 1).
    """
    return days_before_month(month) + day


def _build_tables() -> tuple[tuple[int, ...], tuple[int, ...]]:
    pairs = [month_day_formula(doy) for doy in range(LAST_DAY_OF_YEAR + 1)]
    return tuple(m for m, _ in pairs), tuple(d for _, d in pairs)


MONTH_BY_DAY_OF_YEAR, DAY_BY_DAY_OF_YEAR = _build_tables()


def month_day_table(day_of_year: int) -> tuple[int, int]:
    return MONTH_BY_DAY_OF_YEAR[day_of_year], DAY_BY_DAY_OF_YEAR[day_of_year]


_MAPPERS = {
    "formula": month_day_formula,
    "table": month_day_table,
}


def check_strategy(strategy: str) -> None:
    if strategy not in _MAPPERS:
        valid = ", ".join(STRATEGIES)
        raise ValueError(f"Invalid strategy '{strategy}'. Valid strategies: {valid}")


def month_day(
    day_of_year: int, strategy: Strategy = DEFAULT_STRATEGY
) -> tuple[int, int]:
    """Map a zero-based day offset (0..365) to a March-based (month, day).

    Args:
        day_of_year: Offset from March 1 of the March-based year
        strategy: "formula" or "table"

    Returns:
        (month, day) with month in 3..14

    Raises:
        ValueError: If the offset is outside 0..365 or the strategy is unknown
    """
    check_strategy(strategy)
    if not 0 <= day_of_year <= LAST_DAY_OF_YEAR:
        raise ValueError(
            f"day_of_year must be between 0 and {LAST_DAY_OF_YEAR}, "
            f"got {day_of_year}"
        )
    return _MAPPERS[strategy](day_of_year)


__all__ = [
    "Strategy",
    "DEFAULT_STRATEGY",
    "STRATEGIES",
    "MONTH_BY_DAY_OF_YEAR",
    "DAY_BY_DAY_OF_YEAR",
    "days_before_month",
    "day_of_year_formula",
    "month_day",
    "month_day_formula",
    "month_day_table",
]
