from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from custom_rule.config import get_config
from custom_rule.core.factory import PluginFactory
from custom_rule.protocols import TranslatorProtocol, ValidatorProtocol
from custom_rule.translation import DEFAULT_LINES, DictTranslator

logger = logging.getLogger(__name__)


class ValidatorFactory(PluginFactory[ValidatorProtocol]):
    """Factory for validation sessions.

    Engines are session classes whose constructor accepts the keyword
    arguments ``translator``, ``data``, ``rules``, ``messages`` and
    ``attributes``. The reference
    ``Validator`` is registered as "default"; hosts may register their own
    and select it via the ``CUSTOM_RULE_ENGINE`` setting.

    Example:
        >>> validator = ValidatorFactory.make({"age": 3}, {"age": ["required", int]})
        >>> validator.passes()
        True

        # Use a different engine
        >>> ValidatorFactory.register("strict", StrictValidator)
        >>> ValidatorFactory.make(data, rules, engine="strict")
    """

    _registry: ClassVar[dict[str, type[ValidatorProtocol]]] = {}
    _default_type: ClassVar[str] = "default"
    _entity_name: ClassVar[str] = "validation engine"
    _translator: ClassVar[TranslatorProtocol | None] = None

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure the reference engine is registered."""
        if "default" not in cls._registry:
            from custom_rule.validation.validator import Validator

            cls._registry["default"] = Validator  # type: ignore[assignment]

    @classmethod
    def make(
        cls,
        data: Mapping[str, Any],
        rules: Mapping[str, Any],
        messages: Mapping[str, str] | None = None,
        attributes: Mapping[str, str] | None = None,
        engine: str | None = None,
    ) -> ValidatorProtocol:
        """Create a validation session.

        Args:
            data: The whole record under validation.
            rules: Mapping of attribute to rule tokens.
            messages: Custom failure messages.
            attributes: Custom attribute labels.
            engine: Registered engine name. Defaults to the configured engine.

        Returns:
            A new, not yet evaluated, validation session.

        Raises:
            ValueError: If the engine name is not registered.
        """
        name = engine or get_config().engine
        logger.debug("Creating %s session for %s", name, ", ".join(rules))
        return cls.create(
            name,
            translator=cls.get_translator(),
            data=data,
            rules=rules,
            messages=messages or {},
            attributes=attributes or {},
        )

    @classmethod
    def get_translator(cls) -> TranslatorProtocol:
        """Get the translator handed to new sessions.

        A ``DictTranslator`` with the built-in English lines is created on
        first use when none was set.
        """
        if cls._translator is None:
            config = get_config()
            cls._translator = DictTranslator(
                DEFAULT_LINES,
                locale=config.locale,
                fallback=config.fallback_locale,
            )
        return cls._translator

    @classmethod
    def set_translator(cls, translator: TranslatorProtocol | None) -> None:
        """Set the translator handed to new sessions; None restores the default."""
        cls._translator = translator

    @classmethod
    def reset(cls) -> None:
        """Drop the translator and custom engines (mainly for testing)."""
        cls._translator = None
        cls.clear_registry()
