from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache


def _env_flag(name: str, default: str = "1") -> bool:
    value = os.getenv(name, default)
    return value.lower() not in {"0", "false", "no"}


@dataclass
class CustomRuleConfig:
    """Configuration for the reference translator and validation engine."""

    locale: str = field(default_factory=lambda: os.getenv("CUSTOM_RULE_LOCALE", "en"))
    fallback_locale: str = field(
        default_factory=lambda: os.getenv("CUSTOM_RULE_FALLBACK_LOCALE", "en")
    )
    engine: str = field(default_factory=lambda: os.getenv("CUSTOM_RULE_ENGINE", "default"))
    strict_types: bool = field(default_factory=lambda: _env_flag("CUSTOM_RULE_STRICT_TYPES", "0"))


@lru_cache(maxsize=1)
def get_config() -> CustomRuleConfig:
    """Get the process-wide configuration, read from the environment once.

    Call ``get_config.cache_clear()`` to pick up environment changes.
    """
    return CustomRuleConfig()
