"""Tests for exception payloads and pickling."""

import copy
import pickle

import pytest

from tscal import (
    CalendarError,
    DateInvalid,
    GateError,
    GateNotPaused,
    GatePaused,
    TimestampOutOfRange,
    Unauthorized,
)


@pytest.mark.parametrize(
    "error",
    [
        TimestampOutOfRange(951868799),
        DateInvalid(2000, 13, 1, "month must be between 1 and 12"),
        DateInvalid(1999, 3, 1),
        Unauthorized("attacker", "OWNER_ROLE"),
        GatePaused(),
        GateNotPaused(),
    ],
)
def test_errors_survive_pickle_and_copy(error):
    """Test that errors keep type, attributes and message across pickle and copy."""
    for clone in (pickle.loads(pickle.dumps(error)), copy.copy(error)):
        assert type(clone) is type(error)
        assert str(clone) == str(error)
        assert vars(clone) == vars(error)


def test_date_invalid_payload():
    """Test that the offending fields and reason are attached."""
    error = DateInvalid(2000, 2, 29, "dates before 2000-03-01 are not supported")

    assert (error.year, error.month, error.day) == (2000, 2, 29)
    assert str(error) == (
        "Invalid date (2000, 2, 29): dates before 2000-03-01 are not supported"
    )
    assert isinstance(error, CalendarError)
    assert isinstance(error, ValueError)


def test_gate_errors_share_base():
    """Test that collaborator errors are not calendar errors."""
    for error in (Unauthorized("a", "r"), GatePaused(), GateNotPaused()):
        assert isinstance(error, GateError)
        assert not isinstance(error, ValueError)
