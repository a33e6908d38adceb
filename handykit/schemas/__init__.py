"""Pydantic schemas for parsed values."""

from .difference import Difference

__all__ = [
    "Difference",
]
