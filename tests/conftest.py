"""Shared test fixtures for handykit."""

from datetime import datetime, UTC

import pytest

from handykit.utils import isodatetime


# 2000-01-01T15:00:00Z
FIXED_NOW = 946738800000


@pytest.fixture
def fixed_clock():
    """Clock that always reports 2000-01-01T15:00:00Z."""
    return lambda: FIXED_NOW


@pytest.fixture
def clock_at():
    """Build a clock frozen at the given calendar fields (UTC).

    Usage: clock_at(2023, 1, 31) returns a clock reading 2023-01-31T00:00:00Z.
    """
    def _clock_at(*fields):
        instant = isodatetime.to_millis(datetime(*fields, tzinfo=UTC))
        return lambda: instant
    return _clock_at
