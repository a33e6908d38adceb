"""String comparison and formatting helpers."""

import re
from collections.abc import Mapping


def simplify(s) -> str:
    """Simplify a string for comparison (trim and lowercase)."""
    return str(s).strip().lower()


def includes(whole, part) -> bool:
    """Whether ``whole`` contains ``part``, ignoring case and outer whitespace.

    A missing (None) part is always contained.
    """
    return part is None or simplify(part) in simplify(whole)


def contains(whole, part) -> bool:
    """Alias of includes()."""
    return includes(whole, part)


def format_text(text, *replacements) -> str:
    """Replace ``{key}`` placeholders in text.

    Replacements are either mappings, merged in order so later keys win,
    or plain values filling ``{0}``, ``{1}``... by position. Keys match
    case-insensitively and every occurrence is replaced.

    Examples:
        >>> format_text("{greeting} {thing}!", {"greeting": "Hello", "thing": "house"}, {"thing": "world"})
        'Hello world!'
        >>> format_text("{1} {0}!", "world", "Hello")
        'Hello world!'
    """
    result = str(text)
    if not replacements:
        return result

    for key, value in _arguments(replacements).items():
        result = re.sub(
            r"\{" + re.escape(str(key)) + r"\}",
            lambda _match, value=value: str(value),
            result,
            flags=re.IGNORECASE
        )
    return result


def textify(text: str) -> str:
    """Turn a camelCase string into readable text.

    Examples:
        >>> textify("helloWorld!")
        'Hello world!'
    """
    spaced = re.sub(r"[A-Z]", lambda m: f" {m.group().lower()}", text)
    return re.sub(r"^[a-z]", lambda m: m.group().upper(), spaced)


def _arguments(replacements: tuple) -> dict:
    if isinstance(replacements[0], Mapping):
        merged = {}
        for replacement in replacements:
            merged.update(replacement)
        return merged
    return {str(index): value for index, value in enumerate(replacements)}
