from .convert import date_to_timestamp, midnight, timestamp_to_date
from .core import Filter, Timeline, union
from .date import CalendarDate
from .day_of_year import DEFAULT_STRATEGY, Strategy, month_day
from .errors import (
    CalendarError,
    DateInvalid,
    GateError,
    GateNotPaused,
    GatePaused,
    TimestampOutOfRange,
    Unauthorized,
)
from .gates import Authorizer, Pausable, PauseGate, RoleRegistry, Version
from .guard import is_valid_date, is_valid_timestamp
from .interval import Interval
from .periods import Period, calendar_days, calendar_months, in_months
from .util import BASE_TIMESTAMP, BASE_YEAR, LAST_TIMESTAMP

VERSION = Version(0, 1, 0)
__version__ = str(VERSION)

__all__ = [
    "timestamp_to_date",
    "date_to_timestamp",
    "midnight",
    "month_day",
    "Strategy",
    "DEFAULT_STRATEGY",
    "is_valid_date",
    "is_valid_timestamp",
    "CalendarDate",
    "Interval",
    "Timeline",
    "Filter",
    "union",
    "Period",
    "calendar_days",
    "calendar_months",
    "in_months",
    "CalendarError",
    "TimestampOutOfRange",
    "DateInvalid",
    "GateError",
    "Unauthorized",
    "GatePaused",
    "GateNotPaused",
    "Authorizer",
    "RoleRegistry",
    "PauseGate",
    "Pausable",
    "Version",
    "VERSION",
    "BASE_YEAR",
    "BASE_TIMESTAMP",
    "LAST_TIMESTAMP",
]
