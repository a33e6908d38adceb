"""Type coercion helpers for loosely typed input (query strings, env, JSON)."""

import logging
from datetime import datetime, date, time, UTC

from dateutil import parser as date_parser

from . import isodatetime
from ..config import settings
from ..exceptions import CoercionError

logger = logging.getLogger(__name__)


def to_boolean(value) -> bool:
    """Coerce a value to bool.

    Only None, False and the text "false" are false; everything else,
    including 0 and the empty string, is true.
    """
    if isinstance(value, bool):
        return value
    return value is not None and str(value) != "false"


def to_datetime(stamp, strict: bool | None = None) -> datetime | None:
    """Coerce a datetime, date, epoch-millisecond number or date string.

    Args:
        stamp: Value to coerce. Datetimes are returned unchanged, dates become
               UTC midnight and numbers are milliseconds since the epoch.
               Strings are read as ISO 8601 first, then in any format
               dateutil understands; naive results are UTC.
        strict: Raise instead of returning None on failure.
                Defaults to settings.strict_coercion.

    Returns:
        The datetime, or None if stamp cannot be read

    Raises:
        CoercionError: If strict and stamp cannot be read
    """
    if isinstance(stamp, datetime):
        return stamp
    if isinstance(stamp, date):
        return datetime.combine(stamp, time(), tzinfo=UTC)

    try:
        if isinstance(stamp, (int, float)) and not isinstance(stamp, bool):
            return isodatetime.from_millis(stamp)
        if isinstance(stamp, str):
            return _parse_text(stamp)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Cannot coerce {stamp!r} to datetime: {e}")

    if settings.strict_coercion if strict is None else strict:
        raise CoercionError(
            f"Cannot coerce {type(stamp).__name__} to datetime",
            {"value": stamp}
        )
    return None


def _parse_text(stamp: str) -> datetime:
    try:
        return isodatetime.to_datetime(stamp)
    except ValueError:
        pass

    # Flexible formats: RFC 2822, "2000/01/31", "Jan 31 2000 3pm"...
    parsed = date_parser.parse(stamp)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
