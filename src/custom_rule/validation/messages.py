"""Failure message container."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field


class MessageBag(BaseModel):
    """Ordered failure messages keyed by attribute.

    Example:
        >>> bag = MessageBag()
        >>> bag.add("age", "The age field is required.")
        >>> bag.first("age")
        'The age field is required.'
    """

    messages: dict[str, list[str]] = Field(default_factory=dict)

    def add(self, key: str, message: str) -> None:
        """Append a message for ``key``; exact duplicates are ignored."""
        lines = self.messages.setdefault(key, [])
        if message not in lines:
            lines.append(message)

    def add_many(self, key: str, messages: Iterable[str]) -> None:
        for message in messages:
            self.add(key, message)

    def merge(self, other: MessageBag) -> None:
        """Merge another bag's messages into this one."""
        for key, lines in other.messages.items():
            self.add_many(key, lines)

    def has(self, key: str) -> bool:
        return bool(self.messages.get(key))

    def first(self, key: str | None = None) -> str | None:
        """Get the first message for ``key``, or the first message overall."""
        if key is not None:
            lines = self.messages.get(key) or []
            return lines[0] if lines else None
        for lines in self.messages.values():
            if lines:
                return lines[0]
        return None

    def get(self, key: str) -> list[str]:
        return list(self.messages.get(key, []))

    def all(self) -> list[str]:
        """Get every message, in insertion order."""
        return [message for lines in self.messages.values() for message in lines]

    def keys(self) -> list[str]:
        return [key for key, lines in self.messages.items() if lines]

    def is_empty(self) -> bool:
        return not any(self.messages.values())

    def count(self) -> int:
        return sum(len(lines) for lines in self.messages.values())

    def to_dict(self) -> dict[str, list[str]]:
        return {key: list(lines) for key, lines in self.messages.items() if lines}
