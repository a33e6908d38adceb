"""Parsed form of a difference string."""

from pydantic import BaseModel, ConfigDict, Field


class Difference(BaseModel):
    """Signed offsets per calendar unit, as read from a difference string.

    Units absent from the string stay at 0.
    """

    model_config = ConfigDict(frozen=True)

    years: int = Field(default=0, description="Offset in years (suffix 'y')")
    months: int = Field(default=0, description="Offset in months (suffix 'M')")
    days: int = Field(default=0, description="Offset in days (suffix 'd')")
    hours: int = Field(default=0, description="Offset in hours (suffix 'h')")
    minutes: int = Field(default=0, description="Offset in minutes (suffix 'm')")
    seconds: int = Field(default=0, description="Offset in seconds (suffix 's')")
    milliseconds: int = Field(default=0, description="Offset in milliseconds (suffix 'ms')")

    @property
    def is_zero(self) -> bool:
        """True when every offset is 0."""
        return not any(self.model_dump().values())
