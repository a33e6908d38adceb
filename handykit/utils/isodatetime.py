"""ISO 8601 and epoch-millisecond conversion utilities.

This module centralizes all transformations between Python datetime objects,
ISO 8601 strings and Instants (integer milliseconds since the Unix epoch).
Naive datetimes are always read as UTC.
"""

from datetime import datetime, timedelta, UTC

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def to_timestamp(dt: datetime) -> str:
    """Convert datetime to ISO 8601 UTC timestamp string."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).isoformat().replace("+00:00", "Z")


def to_datetime(timestamp: str) -> datetime:
    """Convert ISO 8601 timestamp string to an aware datetime.

    Raises:
        ValueError: If timestamp is not ISO 8601
    """
    dt = datetime.fromisoformat(timestamp.strip().replace('Z', '+00:00'))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def to_millis(dt: datetime) -> int:
    """Convert datetime to milliseconds since the epoch."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return (dt - EPOCH) // timedelta(milliseconds=1)


def from_millis(ms: int) -> datetime:
    """Convert milliseconds since the epoch to an aware UTC datetime.

    Raises:
        OverflowError: If ms is outside the datetime range
    """
    return EPOCH + timedelta(milliseconds=ms)


def now() -> str:
    """Get current UTC timestamp as ISO 8601 string."""
    return to_timestamp(datetime.now(UTC))


def now_millis() -> int:
    """Get current time as milliseconds since the epoch."""
    return to_millis(datetime.now(UTC))
