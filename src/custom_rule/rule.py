"""Base class for custom validation rules.

Concrete rules implement ``passes`` and report failures through ``_fail``:

    class EvenNumber(BaseCustomRule):
        def passes(self, attribute: str, value: Any) -> bool:
            self._reset_messages()
            if value % 2:
                return self._fail("validation.even")
            return True

They can also reuse the validation engine for part of the check, merging in
any extra rules the caller attached with ``rules(...)``:

    class Username(BaseCustomRule):
        def passes(self, attribute: str, value: Any) -> bool:
            self._reset_messages()
            validator = self._validate(attribute, ["required", str])
            if validator.fails():
                return self._fail(validator.errors().get(attribute))
            return True

A rule's "default" configuration is registered once at startup and reused
through the class-level constructors:

    Username.defaults(lambda: Username().rules(Annotated[str, Field(max_length=32)]))
    rules = {"username": Username.required()}
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, Self

from custom_rule.core.defaults import DefaultCallback, default_callbacks
from custom_rule.core.errors import InvalidDefaultCallbackError
from custom_rule.protocols import RuleProtocol, TranslatorProtocol, ValidatorProtocol, is_rule
from custom_rule.support import conditionable
from custom_rule.support.arr import wrap
from custom_rule.validation.factory import ValidatorFactory

logger = logging.getLogger(__name__)


class BaseCustomRule(ABC):
    """Abstract base for custom validation rules.

    Satisfies ``RuleProtocol``, ``DataAwareRuleProtocol`` and
    ``ValidatorAwareRuleProtocol``: the validation engine injects the active
    session and the whole record before calling ``passes``.

    Instances are meant for one validation pass at a time. Messages are
    never cleared implicitly; rules that may be reused call
    ``_reset_messages()`` at the start of ``passes``.
    """

    def __init__(self) -> None:
        self._validator: ValidatorProtocol | None = None
        self._data: Mapping[str, Any] = {}
        self._custom_rules: list[Any] = []
        self._messages: list[str] = []

    @abstractmethod
    def passes(self, attribute: str, value: Any) -> bool:
        """Determine if the validation rule passes.

        Args:
            attribute: Name of the attribute under validation.
            value: Value of the attribute.

        Returns:
            True if valid. On False, failure messages must have been added
            via ``_fail``.
        """
        ...

    # ------------------------------------------------------------------
    # Default configuration
    # ------------------------------------------------------------------

    @classmethod
    def defaults(cls, callback: DefaultCallback | None = None) -> RuleProtocol | None:
        """Set the callback that builds the default configuration of the rule.

        Called without arguments, returns the current default configuration
        and then resets the callback.

        Args:
            callback: Zero-argument callable returning a rule, or an instance
                of this class.

        Returns:
            The previous default rule when ``callback`` is None, else None.

        Raises:
            InvalidDefaultCallbackError: If ``callback`` is neither callable
                nor an instance of this class.
        """
        output = None

        if callback is None:
            output = cls.default()
        elif not callable(callback) and not isinstance(callback, cls):
            raise InvalidDefaultCallbackError.for_rule(cls, callback)

        default_callbacks.set(cls, callback)

        return output

    @classmethod
    def default(cls) -> RuleProtocol:
        """Get the default configuration of the rule as an instance.

        Falls back to a bare ``cls()`` when no callback is registered or the
        callback does not produce a rule.
        """
        callback = default_callbacks.get(cls)
        rule = callback() if callable(callback) else callback

        if is_rule(rule):
            return rule

        if rule is not None:
            logger.warning(
                "Default callback for %s returned %s, which is not a rule; using a bare instance",
                cls.__qualname__,
                type(rule).__name__,
            )
        return cls()

    @classmethod
    def to_list(cls) -> list[Any]:
        """Get the default configuration of the rule as a rule list."""
        return [cls.default()]

    @classmethod
    def required(cls) -> list[Any]:
        """Get the default configuration of the rule and mark the field as required."""
        return ["required", cls.default()]

    @classmethod
    def sometimes(cls) -> list[Any]:
        """Get the default configuration of the rule, validated only when present."""
        return ["sometimes", cls.default()]

    @classmethod
    def nullable(cls) -> list[Any]:
        """Get the default configuration of the rule and mark the field as nullable."""
        return ["nullable", cls.default()]

    # ------------------------------------------------------------------
    # Engine injection and configuration
    # ------------------------------------------------------------------

    @property
    def validator(self) -> ValidatorProtocol | None:
        return self._validator

    @property
    def data(self) -> Mapping[str, Any]:
        return self._data

    @property
    def custom_rules(self) -> list[Any]:
        return list(self._custom_rules)

    def set_validator(self, validator: ValidatorProtocol) -> Self:
        """Set the performing validator."""
        self._validator = validator
        return self

    def set_data(self, data: Mapping[str, Any]) -> Self:
        """Set the data under validation.

        The mapping is kept as given, so later changes by the host are seen
        by ``_validate``.
        """
        self._data = data
        return self

    def rules(self, rules: str | Sequence[Any] | Any) -> Self:
        """Specify additional rules merged after the rule's own rules in ``_validate``.

        A single token is wrapped into a one-element list. Replaces any
        rules set earlier.
        """
        self._custom_rules = wrap(rules)
        return self

    def when(self, value: Any, callback: Any = None, default: Any = None) -> Any:
        """Apply ``callback(self, value)`` if ``value`` is truthy, else ``default``."""
        return conditionable.when(self, value, callback, default)

    def unless(self, value: Any, callback: Any = None, default: Any = None) -> Any:
        """Apply ``callback(self, value)`` if ``value`` is falsy, else ``default``."""
        return conditionable.unless(self, value, callback, default)

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def message(self) -> list[str]:
        """Get the failure messages collected so far."""
        return list(self._messages)

    def _reset_messages(self) -> None:
        self._messages = []

    def _fail(self, messages: str | Sequence[str]) -> bool:
        """Add the given failures and return False.

        Each entry is resolved through the translator of the active
        validator, so message keys and literal messages both work.
        """
        translator = self._translator()
        resolved = [translator.get(message) for message in wrap(messages)]
        self._messages = [*self._messages, *resolved]

        logger.debug("%s failed: %s", type(self).__name__, resolved)
        return False

    def _translator(self) -> TranslatorProtocol:
        if self._validator is not None:
            return self._validator.get_translator()
        return ValidatorFactory.get_translator()

    # ------------------------------------------------------------------
    # Nested validation
    # ------------------------------------------------------------------

    def _validate(self, attribute: str, rules: Sequence[Any]) -> ValidatorProtocol:
        """Build a validation session for ``attribute`` over the current data.

        The session uses ``rules`` followed by the custom rules, and reuses the
        active validator's custom messages and attribute labels.
        """
        messages = self._validator.custom_messages if self._validator is not None else {}
        attributes = self._validator.custom_attributes if self._validator is not None else {}

        return ValidatorFactory.make(
            self._data,
            {attribute: [*wrap(rules), *self._custom_rules]},
            messages,
            attributes,
        )
