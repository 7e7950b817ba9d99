"""Process-wide registry of default rule callbacks.

Each concrete rule class owns one slot holding either a zero-argument
callable that builds the rule's "default" configuration, or a ready-made
instance of that configuration. Subclasses never share a slot.

Mutation contract: slots are written while the application is being
configured (typically once at startup) and only read while requests are
being validated. The registry performs no locking; writing a slot while
another thread reads it has no ordering guarantee.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeAlias

logger = logging.getLogger(__name__)

DefaultCallback: TypeAlias = "Callable[[], Any] | Any"


class DefaultCallbackRegistry:
    """Mapping of rule class to its default callback."""

    def __init__(self) -> None:
        self._callbacks: dict[type, DefaultCallback] = {}

    def get(self, rule_class: type) -> DefaultCallback | None:
        """Get the callback stored for ``rule_class``, or None when unset."""
        return self._callbacks.get(rule_class)

    def set(self, rule_class: type, callback: DefaultCallback | None) -> None:
        """Store ``callback`` for ``rule_class``.

        Storing None resets the slot to its unset state.
        """
        if callback is None:
            self.forget(rule_class)
            return

        self._callbacks[rule_class] = callback
        logger.debug("Registered default callback for %s", rule_class.__qualname__)

    def has(self, rule_class: type) -> bool:
        return rule_class in self._callbacks

    def forget(self, rule_class: type) -> None:
        """Reset the slot for ``rule_class``."""
        if self._callbacks.pop(rule_class, None) is not None:
            logger.debug("Reset default callback for %s", rule_class.__qualname__)

    def clear(self) -> None:
        """Reset every slot (mainly for testing)."""
        self._callbacks.clear()

    def __len__(self) -> int:
        return len(self._callbacks)


default_callbacks = DefaultCallbackRegistry()
