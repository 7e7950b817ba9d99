from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from custom_rule.validation.messages import MessageBag


@runtime_checkable
class RuleProtocol(Protocol):
    """Protocol for validation rule objects.

    Anything exposing ``passes`` and ``message`` can be placed in a rule list
    and evaluated by a validation session.
    """

    def passes(self, attribute: str, value: Any) -> bool:
        """Determine if the validation rule passes.

        Args:
            attribute: Name of the attribute under validation.
            value: Value of the attribute.

        Returns:
            True if the value is valid, False otherwise.
        """
        ...

    def message(self) -> str | list[str]:
        """Get the validation error message(s)."""
        ...


@runtime_checkable
class DataAwareRuleProtocol(Protocol):
    """Protocol for rules that need the whole record under validation."""

    def set_data(self, data: Mapping[str, Any]) -> Any:
        """Set the data under validation."""
        ...


@runtime_checkable
class ValidatorAwareRuleProtocol(Protocol):
    """Protocol for rules that need the session performing the validation."""

    def set_validator(self, validator: ValidatorProtocol) -> Any:
        """Set the performing validator."""
        ...


@runtime_checkable
class TranslatorProtocol(Protocol):
    """Protocol for translation services.

    Implementations resolve a message key into a localized string. A key
    that cannot be resolved is expected to come back unchanged.
    """

    def get(
        self,
        key: str,
        replace: Mapping[str, Any] | None = None,
        locale: str | None = None,
    ) -> str:
        """Resolve a message key.

        Args:
            key: Dotted message key (e.g. "validation.required").
            replace: Placeholder values substituted into the message.
            locale: Locale to resolve in. Defaults to the translator's locale.

        Returns:
            The resolved message, or the key itself when not found.
        """
        ...


@runtime_checkable
class ValidatorProtocol(Protocol):
    """Protocol for validation sessions.

    A session runs a rule set against a data map and exposes the outcome.
    Custom rules read ``custom_messages`` / ``custom_attributes`` from the
    active session to build nested sessions that behave the same way.
    """

    custom_messages: dict[str, str]
    custom_attributes: dict[str, str]

    def get_translator(self) -> TranslatorProtocol:
        """Get the translator used by this session."""
        ...

    def passes(self) -> bool:
        """Run the rules and report whether all of them passed."""
        ...

    def fails(self) -> bool:
        """Run the rules and report whether any of them failed."""
        ...

    def errors(self) -> MessageBag:
        """Get the failure messages, keyed by attribute."""
        ...


def is_rule(candidate: Any) -> bool:
    """Check whether ``candidate`` can be used as a validation rule object."""
    return not isinstance(candidate, type) and isinstance(candidate, RuleProtocol)
