"""Relative date arithmetic from compact difference strings.

A difference string is a whitespace-separated list of signed integers, each
followed by a unit suffix:

    y   years        h   hours
    M   months       m   minutes
    d   days         s   seconds
                     ms  milliseconds

All parts are optional, may appear in any order and accept any sign; the plus
sign can be omitted, e.g. ``"+40M -30h 180s"``. When a suffix appears more than
once the first token wins. Fractions are truncated toward zero (``"1.5h"`` is
one hour) and unreadable fragments count as 0.

    >>> clock = lambda: 946738800000          # 2000-01-01T15:00:00Z
    >>> parse_difference("5h", clock)         # 2000-01-01T20:00:00Z
    946756800000
    >>> format_difference(946756800000, 946738800000)
    '5h'
"""

import calendar
import logging
import re
from collections.abc import Callable
from datetime import date, datetime
from decimal import Decimal

from . import isodatetime
from ..exceptions import DateRangeError
from ..schemas import Difference

logger = logging.getLogger(__name__)

Clock = Callable[[], int]

# Field name -> suffix, in the order fields are looked up
UNIT_SUFFIXES = {
    "years": "y",
    "months": "M",
    "days": "d",
    "hours": "h",
    "minutes": "m",
    "seconds": "s",
    "milliseconds": "ms",
}

# (divisor, unit) steps used to break a millisecond delta into mixed units
UNIT_LADDER = (
    (1000, "ms"),
    (60, "s"),
    (60, "m"),
    (24, "h"),
    (30, "d"),
    (12, "M"),
    (float("inf"), "y"),
)

_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")
_DAYS_BEFORE_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
_EPOCH_DAYS = date(1970, 1, 1).toordinal() - 1


def parse_components(diff_string: str) -> Difference:
    """Read the per-unit offsets out of a difference string."""
    tokens = str(diff_string).split()
    return Difference(**{
        field: _find(tokens, suffix) for field, suffix in UNIT_SUFFIXES.items()
    })


def parse_difference(diff_string: str, clock: Clock | None = None) -> int:
    """Get the instant a difference string points to, relative to now.

    Offsets are added field by field to the current UTC calendar date and
    overflowing fields roll over (month 13 is January of the next year,
    January 32nd is February 1st).

    Args:
        diff_string: Time difference from now, e.g. ``"-2d 3h"``
        clock: Zero-argument callable returning the current instant in
               milliseconds. Defaults to the system clock.

    Returns:
        Milliseconds since the Unix epoch. Never raises for malformed input;
        unreadable parts count as 0.
    """
    offsets = parse_components(diff_string)
    now = (clock or isodatetime.now_millis)()
    if offsets.is_zero:
        return now

    current = isodatetime.from_millis(now)

    return _utc_instant(
        current.year + offsets.years,
        current.month + offsets.months,
        current.day + offsets.days,
        current.hour + offsets.hours,
        current.minute + offsets.minutes,
        current.second + offsets.seconds,
        current.microsecond // 1000 + offsets.milliseconds,
    )


timestamp_from = parse_difference


def date_from(diff_string: str, clock: Clock | None = None) -> datetime:
    """Get an aware UTC datetime from a difference string.

    Raises:
        DateRangeError: If the resulting instant cannot be represented
    """
    instant = parse_difference(diff_string, clock)
    try:
        return isodatetime.from_millis(instant)
    except OverflowError as e:
        raise DateRangeError(
            f"Difference '{diff_string}' is outside the supported date range",
            {"instant": instant}
        ) from e


def format_difference(instant_a: int, instant_b: int) -> str:
    """Express ``instant_a - instant_b`` as the shortest difference string.

    Days are counted as 30 per month and months as 12 per year. A zero delta
    gives an empty string; a negative delta gives negative magnitudes.
    """
    value = instant_a - instant_b
    tokens = []

    for size, unit in UNIT_LADDER:
        if abs(value) < size:
            if value:
                tokens.append(f"{value}{unit}")
            break
        value, magnitude = _truncated_divmod(value, size)
        if magnitude:
            tokens.append(f"{magnitude}{unit}")

    return " ".join(reversed(tokens))


def diff(date_a: datetime, date_b: datetime) -> str:
    """Difference string between two datetimes (naive ones are read as UTC)."""
    return format_difference(
        isodatetime.to_millis(date_a),
        isodatetime.to_millis(date_b)
    )


def _find(tokens: list[str], suffix: str) -> int:
    for token in tokens:
        # "ms" tokens belong to milliseconds only
        if suffix != "ms" and token.endswith("ms"):
            continue
        if token.endswith(suffix):
            number = token[:-len(suffix)]
            if _NUMBER.fullmatch(number):
                return int(Decimal(number))
            logger.debug(f"Ignoring unreadable difference fragment {token!r}")
            return 0
    return 0


def _truncated_divmod(value: int, size: int) -> tuple[int, int]:
    """divmod rounding toward zero; the remainder takes the sign of value."""
    quotient, remainder = divmod(abs(value), size)
    if value < 0:
        return -quotient, -remainder
    return quotient, remainder


def _utc_instant(year, month, day, hour, minute, second, millisecond) -> int:
    """Milliseconds since the epoch for possibly overflowing UTC fields.

    Months carry into years first; the remaining fields are then a linear
    offset from the first day of the resulting month.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1

    prior_years = year - 1
    days = (
        prior_years * 365 + prior_years // 4 - prior_years // 100 + prior_years // 400
        + _DAYS_BEFORE_MONTH[month - 1]
        + (1 if month > 2 and calendar.isleap(year) else 0)
        + day - 1
        - _EPOCH_DAYS
    )
    return (((days * 24 + hour) * 60 + minute) * 60 + second) * 1000 + millisecond
