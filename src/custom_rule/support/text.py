from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def make_replacements(line: str, replace: Mapping[str, Any]) -> str:
    """Substitute ``:name`` placeholders in a message.

    Each key is replaced in three forms: ``:name`` as given, ``:Name``
    capitalized and ``:NAME`` upper-cased.

    Example:
        >>> make_replacements("The :attribute is invalid.", {"attribute": "age"})
        'The age is invalid.'
    """
    # Longer keys first so ":attribute_name" is not clobbered by ":attribute".
    for key in sorted(replace, key=len, reverse=True):
        value = str(replace[key])
        line = (
            line.replace(f":{key.upper()}", value.upper())
            .replace(f":{key[:1].upper()}{key[1:]}", value[:1].upper() + value[1:])
            .replace(f":{key}", value)
        )
    return line
