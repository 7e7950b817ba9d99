"""Validation sessions.

This module provides the message container, the reference validation
session and the factory custom rules use to build nested sessions.
"""

from custom_rule.validation.factory import ValidatorFactory
from custom_rule.validation.messages import MessageBag
from custom_rule.validation.validator import MODIFIERS, Validator

__all__ = [
    "MODIFIERS",
    "MessageBag",
    "Validator",
    "ValidatorFactory",
]
