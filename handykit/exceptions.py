"""Exception hierarchy for handykit.

Every error carries a human-readable message and an optional details dict
describing the offending input.
"""


class HandykitError(Exception):
    """Base class for all handykit errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class CoercionError(HandykitError):
    """A value could not be coerced to the requested type."""


class DateRangeError(HandykitError):
    """An instant lies outside the range a datetime can represent."""
