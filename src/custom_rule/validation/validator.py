"""Reference validation session.

``Validator`` runs a per-attribute rule list against a data map. It is the
engine ``ValidatorFactory`` hands out when the host does not register its
own. It understands four kinds of rule tokens:

- modifiers: ``"required"``, ``"nullable"``, ``"sometimes"`` and ``"bail"``
- rule objects: anything satisfying ``RuleProtocol``
- closures: ``fn(attribute, value, fail)``, failing by calling ``fail(message)``
- types: anything pydantic can build a ``TypeAdapter`` for, such as ``int``
  or ``Annotated[int, Field(gt=0)]``

Rule strings with parameters (``"min:3"``) are not parsed; any string that is
not a modifier raises ``UnsupportedRuleError``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Annotated, Any, get_args, get_origin

from pydantic import PydanticSchemaGenerationError, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from custom_rule.config import get_config
from custom_rule.core.errors import RuleValidationError, UnsupportedRuleError
from custom_rule.protocols import (
    DataAwareRuleProtocol,
    TranslatorProtocol,
    ValidatorAwareRuleProtocol,
    is_rule,
)
from custom_rule.support.arr import wrap
from custom_rule.support.text import make_replacements
from custom_rule.validation.messages import MessageBag

logger = logging.getLogger(__name__)

MODIFIERS = frozenset({"required", "nullable", "sometimes", "bail"})

_MISSING = object()


def _is_empty(value: Any) -> bool:
    if value is None or value is _MISSING:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, set, frozenset, Mapping)):
        return len(value) == 0
    return False


def _is_type_form(token: Any) -> bool:
    return isinstance(token, type) or get_origin(token) is not None


def _type_name(token: Any) -> str:
    if get_origin(token) is Annotated:
        token = get_args(token)[0]
    return getattr(token, "__name__", None) or repr(token)


class Validator:
    """Validation session over one data map.

    Example:
        >>> validator = Validator(
        ...     translator,
        ...     {"age": "12"},
        ...     {"age": ["required", int]},
        ...     attributes={"age": "user age"},
        ... )
        >>> validator.passes()
        True
    """

    def __init__(
        self,
        translator: TranslatorProtocol,
        data: Mapping[str, Any],
        rules: Mapping[str, Any],
        messages: Mapping[str, str] | None = None,
        attributes: Mapping[str, str] | None = None,
        strict: bool | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            translator: Translator used to resolve failure messages.
            data: The whole record under validation.
            rules: Mapping of attribute to a rule token or list of tokens.
            messages: Custom messages keyed by "attribute.rule" or "rule".
            attributes: Custom attribute labels used for ":attribute".
            strict: Use pydantic strict mode for type tokens. Defaults to
                the configured ``strict_types``.
        """
        self._translator = translator
        self.data: Mapping[str, Any] = data
        self.rules: dict[str, list[Any]] = {
            attribute: wrap(tokens) for attribute, tokens in rules.items()
        }
        self.custom_messages: dict[str, str] = dict(messages or {})
        self.custom_attributes: dict[str, str] = dict(attributes or {})
        self._strict = get_config().strict_types if strict is None else strict
        self._errors: MessageBag | None = None

    def get_translator(self) -> TranslatorProtocol:
        return self._translator

    def passes(self) -> bool:
        """Run every rule and report whether all of them passed.

        Each call re-runs the rules from scratch.
        """
        self._errors = MessageBag()

        for attribute, tokens in self.rules.items():
            self._validate_attribute(attribute, tokens)

        return self._errors.is_empty()

    def fails(self) -> bool:
        return not self.passes()

    def errors(self) -> MessageBag:
        """Get the failure messages, running the rules first if needed."""
        if self._errors is None:
            self.passes()
        return self._errors_bag()

    def validated(self) -> dict[str, Any]:
        """Get the validated subset of the data.

        Returns:
            Values of the attributes that have rules and are present.

        Raises:
            RuleValidationError: If any rule failed.
        """
        if not self.errors().is_empty():
            raise RuleValidationError(self.errors())

        output: dict[str, Any] = {}
        for attribute in self.rules:
            value = self._get_value(attribute)
            if value is not _MISSING:
                output[attribute] = value
        return output

    def validate(self) -> dict[str, Any]:
        """Run the rules and return the validated data.

        Raises:
            RuleValidationError: If any rule failed.
        """
        self.passes()
        return self.validated()

    def _validate_attribute(self, attribute: str, tokens: Sequence[Any]) -> None:
        value = self._get_value(attribute)

        if "sometimes" in tokens and value is _MISSING:
            return

        nullable = "nullable" in tokens
        bail = "bail" in tokens

        logger.debug("Validating %s against %d rule(s)", attribute, len(tokens))

        for token in tokens:
            if isinstance(token, str) and token in MODIFIERS:
                if token == "required" and _is_empty(value):
                    self._add_failure(attribute, "required", "validation.required")
                    return
                continue

            if not self._is_validatable(value, nullable):
                continue

            current = None if value is _MISSING else value
            if not self._evaluate(attribute, current, token) and bail:
                return

    @staticmethod
    def _is_validatable(value: Any, nullable: bool) -> bool:
        # Only "required" applies to absent or blank values.
        if value is _MISSING:
            return False
        if isinstance(value, str) and value.strip() == "":
            return False
        return not (value is None and nullable)

    def _evaluate(self, attribute: str, value: Any, token: Any) -> bool:
        if is_rule(token):
            return self._validate_using_rule(attribute, value, token)
        if isinstance(token, str):
            raise UnsupportedRuleError.for_token(attribute, token)
        if _is_type_form(token):
            return self._validate_type(attribute, value, token)
        if callable(token):
            return self._validate_using_closure(attribute, value, token)
        raise UnsupportedRuleError.for_token(attribute, token)

    def _validate_using_rule(self, attribute: str, value: Any, rule: Any) -> bool:
        if isinstance(rule, DataAwareRuleProtocol):
            rule.set_data(self.data)
        if isinstance(rule, ValidatorAwareRuleProtocol):
            rule.set_validator(self)

        if rule.passes(attribute, value):
            return True

        rule_name = type(rule).__name__
        custom = self._custom_message(attribute, rule_name)
        lines = [custom] if custom is not None else wrap(rule.message())

        if not lines:
            self._add_failure(attribute, "rule", "validation.rule")
        # Rule messages arrive already translated; only placeholders are filled in.
        for line in lines:
            self._errors_bag().add(
                attribute, make_replacements(line, {"attribute": self._label(attribute)})
            )

        logger.debug("Rule %s failed for %s", rule_name, attribute)
        return False

    def _validate_using_closure(self, attribute: str, value: Any, closure: Any) -> bool:
        failures: list[str] = []
        closure(attribute, value, failures.append)

        if not failures:
            return True

        custom = self._custom_message(attribute, "closure")
        for line in [custom] if custom is not None else failures:
            self._errors_bag().add(attribute, self._translate(line, attribute))
        return False

    def _validate_type(self, attribute: str, value: Any, token: Any) -> bool:
        try:
            adapter = TypeAdapter(token)
        except PydanticSchemaGenerationError as exc:
            raise UnsupportedRuleError.for_token(attribute, token) from exc

        try:
            adapter.validate_python(value, strict=self._strict)
        except PydanticValidationError as exc:
            logger.debug("Type check failed for %s: %s", attribute, exc.errors())
            self._add_failure(attribute, "type", "validation.type", {"type": _type_name(token)})
            return False
        return True

    def _add_failure(
        self,
        attribute: str,
        rule: str,
        key: str,
        replace: Mapping[str, Any] | None = None,
    ) -> None:
        line = self._custom_message(attribute, rule) or key
        self._errors_bag().add(attribute, self._translate(line, attribute, replace))

    def _custom_message(self, attribute: str, rule: str) -> str | None:
        for key in (f"{attribute}.{rule}", rule):
            if key in self.custom_messages:
                return self.custom_messages[key]
        return None

    def _translate(
        self,
        line: str,
        attribute: str,
        replace: Mapping[str, Any] | None = None,
    ) -> str:
        return self._translator.get(line, {"attribute": self._label(attribute), **(replace or {})})

    def _label(self, attribute: str) -> str:
        return self.custom_attributes.get(attribute, attribute.replace("_", " "))

    def _errors_bag(self) -> MessageBag:
        if self._errors is None:
            self._errors = MessageBag()
        return self._errors

    def _get_value(self, attribute: str) -> Any:
        if attribute in self.data:
            return self.data[attribute]

        node: Any = self.data
        for part in attribute.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return _MISSING
            node = node[part]
        return node
