"""handykit: small stateless helpers.

Import convention: use module-level imports for clarity.

    from handykit.utils import coerce, isodatetime, reldate
    deadline = reldate.parse_difference("+2d -3h")
    label = reldate.format_difference(deadline, isodatetime.now_millis())
    enabled = coerce.to_boolean(raw_flag)
"""

__version__ = "0.1.0"
