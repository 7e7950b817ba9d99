"""custom-rule: a base class for building custom validation rules.

This package provides:
- ``BaseCustomRule``, an abstract rule with a per-class "default"
  configuration, modifier constructors (required / sometimes / nullable),
  merging of extra rules into its own check, and translated failure messages
- Protocols describing rules, translators and validation sessions
- A reference validation session and translator for hosts that do not
  bring their own

Quick Start:
    >>> from custom_rule import BaseCustomRule, ValidatorFactory
    >>> class EvenNumber(BaseCustomRule):
    ...     def passes(self, attribute, value):
    ...         self._reset_messages()
    ...         return value % 2 == 0 or self._fail("The :attribute must be even.")
    >>> validator = ValidatorFactory.make({"count": 3}, {"count": EvenNumber.required()})
    >>> validator.errors().first("count")
    'The count must be even.'

    # Register a default configuration once at startup
    >>> EvenNumber.defaults(lambda: EvenNumber().rules(int))
"""

from __future__ import annotations

from custom_rule.config import CustomRuleConfig, get_config
from custom_rule.core import (
    PACKAGE_NAME,
    CustomRuleError,
    DefaultCallbackRegistry,
    InvalidDefaultCallbackError,
    PluginFactory,
    RuleValidationError,
    UnsupportedRuleError,
    default_callbacks,
)
from custom_rule.protocols import (
    DataAwareRuleProtocol,
    RuleProtocol,
    TranslatorProtocol,
    ValidatorAwareRuleProtocol,
    ValidatorProtocol,
    is_rule,
)
from custom_rule.rule import BaseCustomRule
from custom_rule.support import unless, when, wrap
from custom_rule.translation import DEFAULT_LINES, DictTranslator
from custom_rule.validation import MODIFIERS, MessageBag, Validator, ValidatorFactory

__version__ = "0.1.0"

__all__ = [
    # Core
    "BaseCustomRule",
    # Protocols
    "DataAwareRuleProtocol",
    "RuleProtocol",
    "TranslatorProtocol",
    "ValidatorAwareRuleProtocol",
    "ValidatorProtocol",
    "is_rule",
    # Validation
    "MODIFIERS",
    "MessageBag",
    "Validator",
    "ValidatorFactory",
    # Translation
    "DEFAULT_LINES",
    "DictTranslator",
    # Registries
    "DefaultCallbackRegistry",
    "PluginFactory",
    "default_callbacks",
    # Errors
    "PACKAGE_NAME",
    "CustomRuleError",
    "InvalidDefaultCallbackError",
    "RuleValidationError",
    "UnsupportedRuleError",
    # Config
    "CustomRuleConfig",
    "get_config",
    # Helpers
    "unless",
    "when",
    "wrap",
]
