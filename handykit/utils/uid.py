"""UUID generation utilities.

This is the ONLY module that should import uuid4. All other code should use
uid.generate_uuid().
"""

from uuid import UUID, uuid4


def generate_uuid() -> str:
    """Generate a random RFC 4122 version 4 UUID as a lowercase string."""
    return str(uuid4())


def is_uuid(value) -> bool:
    """Whether value is a canonical (lowercase, hyphenated) UUID v4 string."""
    if not isinstance(value, str):
        return False
    try:
        parsed = UUID(value)
    except ValueError:
        return False
    return parsed.version == 4 and str(parsed) == value
