"""tscal exception hierarchy.

Calendar failures inherit from CalendarError (itself a ValueError, since
every failure is a property of the input). Collaborator failures inherit
from GateError.

Each exception reduces to its constructor arguments so it survives
pickling and copying (e.g. across a process pool).
"""

from tscal.util import BASE_TIMESTAMP, LAST_TIMESTAMP


class CalendarError(ValueError):
    """Base exception for all calendar conversion errors."""

    pass


class TimestampOutOfRange(CalendarError):
    """Timestamp lies outside the convertible window.

    Raised by the forward converter only.
    """

    def __init__(self, timestamp: int):
        self.timestamp: int = timestamp
        super().__init__(
            f"Timestamp {timestamp} is out of range.\n"
            f"Accepted: {BASE_TIMESTAMP} (2000-03-01T00:00:00Z) to "
            f"{LAST_TIMESTAMP} (2399-12-31T23:59:59Z)"
        )

    def __reduce__(self):
        return (type(self), (self.timestamp,))


class DateInvalid(CalendarError):
    """Date fields fail the range or anchor checks.

    Raised by the inverse converter and by CalendarDate. Only coarse
    bounds are checked: day 31 of April is accepted.
    """

    def __init__(self, year: int, month: int, day: int, reason: str = ""):
        self.year: int = year
        self.month: int = month
        self.day: int = day
        self.reason: str = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid date ({year}, {month}, {day}){detail}")

    def __reduce__(self):
        return (type(self), (self.year, self.month, self.day, self.reason))


class GateError(Exception):
    """Base exception for authorization and pause gate failures."""

    pass


class Unauthorized(GateError):
    """Account is missing the role required for an operation."""

    def __init__(self, account: str, role: str):
        self.account: str = account
        self.role: str = role
        super().__init__(f"Account {account!r} is missing role {role!r}")

    def __reduce__(self):
        return (type(self), (self.account, self.role))


class GatePaused(GateError):
    """Operation attempted while the pause gate is engaged."""

    def __init__(self) -> None:
        super().__init__("Operation is not allowed while paused")

    def __reduce__(self):
        return (type(self), ())


class GateNotPaused(GateError):
    """Unpause attempted while the pause gate is not engaged."""

    def __init__(self) -> None:
        super().__init__("Operation requires the gate to be paused")

    def __reduce__(self):
        return (type(self), ())


__all__ = [
    "CalendarError",
    "TimestampOutOfRange",
    "DateInvalid",
    "GateError",
    "Unauthorized",
    "GatePaused",
    "GateNotPaused",
]
