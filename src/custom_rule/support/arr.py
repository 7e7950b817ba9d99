from __future__ import annotations

from typing import Any


def wrap(value: Any) -> list[Any]:
    """Wrap a value in a list unless it already is a list or tuple.

    None becomes an empty list. Strings are treated as single values.

    Example:
        >>> wrap("required")
        ['required']
        >>> wrap(["required", "nullable"])
        ['required', 'nullable']
        >>> wrap(None)
        []
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]
