"""Package error classes.

Configuration mistakes surface as ``CustomRuleError`` subclasses, which
inherit from ``PydanticCustomError`` (and therefore ``ValueError``) so they
compose with pydantic's own error handling. Validation failures are data and
only become an exception when a caller explicitly asks for it via
``Validator.validate()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic_core import PydanticCustomError

if TYPE_CHECKING:
    from custom_rule.validation.messages import MessageBag

# Package identifier for error context
PACKAGE_NAME = "custom_rule"


class CustomRuleError(PydanticCustomError):
    """Base error for custom_rule, carrying the package in its context."""

    @classmethod
    def create(
        cls,
        error_type: str,
        message_template: str,
        context: dict[str, Any] | None = None,
    ) -> CustomRuleError:
        """Build an error with the package identifier merged into the context.

        Args:
            error_type: Type/category of the error.
            message_template: Error message (can include {placeholders}).
            context: Additional context values.

        Returns:
            Error instance ready to be raised.
        """
        return cls(error_type, message_template, {"package": PACKAGE_NAME, **(context or {})})


class InvalidDefaultCallbackError(CustomRuleError):
    """Raised when a rule's default callback is neither callable nor a rule instance."""

    @classmethod
    def for_rule(cls, rule_class: type, callback: Any) -> InvalidDefaultCallbackError:
        return cls.create(  # type: ignore[return-value]
            "invalid_default_callback",
            "The given callback should be callable or an instance of {rule_class}",
            {"rule_class": rule_class.__qualname__, "callback_type": type(callback).__name__},
        )


class UnsupportedRuleError(CustomRuleError):
    """Raised by the validation engine for a rule token it cannot evaluate."""

    @classmethod
    def for_token(cls, attribute: str, token: Any) -> UnsupportedRuleError:
        return cls.create(  # type: ignore[return-value]
            "unsupported_rule",
            "Unsupported validation rule {rule} for attribute {attribute}",
            {"rule": repr(token), "attribute": attribute},
        )


class RuleValidationError(Exception):
    """Raised when a validation session is asked to fail loudly.

    Wraps the session's ``MessageBag`` so callers get every failure at once.
    """

    def __init__(self, messages: MessageBag, context: dict | None = None):
        """Initialize RuleValidationError.

        Args:
            messages: Failure messages keyed by attribute.
            context: Optional additional context to include.
        """
        self.messages = messages
        self.context = {"package": PACKAGE_NAME, **(context or {})}

        summary = "; ".join(
            f"{attribute}: {' '.join(lines)}" for attribute, lines in messages.to_dict().items()
        )
        super().__init__(summary or "The given data was invalid.")

    def errors(self) -> list[dict[str, Any]]:
        """Get the failures as a list of dicts.

        Returns:
            One dict per message with ``field`` and ``msg`` keys.
        """
        return [
            {"field": attribute, "msg": message}
            for attribute, lines in self.messages.to_dict().items()
            for message in lines
        ]

    def __repr__(self) -> str:
        return f"RuleValidationError({self.messages.to_dict()!r}, context={self.context})"
