"""Utility functions for handykit.

Import convention: use module-level imports for clarity.

    from handykit.utils import coerce, isodatetime, reldate, text, uid
    timestamp = isodatetime.now()
    tomorrow = reldate.date_from("1d")
    uuid = uid.generate_uuid()
"""

from . import coerce, isodatetime, reldate, text, uid

__all__ = ["coerce", "isodatetime", "reldate", "text", "uid"]
