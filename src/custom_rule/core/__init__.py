"""custom_rule core - errors, plugin registry and default-callback storage.

Usage:
    from custom_rule.core import (
        # Errors
        CustomRuleError,
        InvalidDefaultCallbackError,
        UnsupportedRuleError,
        RuleValidationError,
        # Registries
        PluginFactory,
        DefaultCallbackRegistry,
        default_callbacks,
    )
"""

from __future__ import annotations

from custom_rule.core.defaults import DefaultCallback, DefaultCallbackRegistry, default_callbacks
from custom_rule.core.errors import (
    PACKAGE_NAME,
    CustomRuleError,
    InvalidDefaultCallbackError,
    RuleValidationError,
    UnsupportedRuleError,
)
from custom_rule.core.factory import PluginFactory

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "CustomRuleError",
    "InvalidDefaultCallbackError",
    "RuleValidationError",
    "UnsupportedRuleError",
    # Registries
    "DefaultCallback",
    "DefaultCallbackRegistry",
    "PluginFactory",
    "default_callbacks",
]
