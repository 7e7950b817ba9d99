"""Conditional chaining helpers.

``when`` and ``unless`` apply a transformation to a target only if a
condition holds, falling back to an alternative (or the target itself)
otherwise. They work on any object; fluent classes expose them as methods
that delegate here.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")

Transform = Callable[[T, Any], Any]


def _resolve(target: Any, value: Any) -> Any:
    return value(target) if callable(value) else value


def _apply(target: T, callback: Transform | None, value: Any) -> T:
    if callback is None:
        return target
    result = callback(target, value)
    return target if result is None else result


def when(
    target: T,
    value: Any,
    callback: Transform | None = None,
    default: Transform | None = None,
) -> T:
    """Apply ``callback`` to ``target`` if ``value`` is truthy.

    Args:
        target: Object passed to the callbacks.
        value: Condition. A callable is called with ``target`` first.
        callback: ``callback(target, value)`` run when the condition holds.
        default: ``default(target, value)`` run when it does not.

    Returns:
        The callback's result, or ``target`` when the callback returns None
        or no callback applies.

    Example:
        >>> rule = when(rule, strict, lambda r, _: r.rules("bail"))
    """
    value = _resolve(target, value)

    if value:
        return _apply(target, callback, value)
    return _apply(target, default, value)


def unless(
    target: T,
    value: Any,
    callback: Transform | None = None,
    default: Transform | None = None,
) -> T:
    """Apply ``callback`` to ``target`` if ``value`` is falsy.

    Mirror image of :func:`when`.
    """
    value = _resolve(target, value)

    if not value:
        return _apply(target, callback, value)
    return _apply(target, default, value)
