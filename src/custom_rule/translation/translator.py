from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from custom_rule.support.text import make_replacements

logger = logging.getLogger(__name__)


class DictTranslator:
    """Translator backed by in-memory dictionaries.

    Lines are organized per locale as nested dicts and addressed with dotted
    keys ("validation.required"). A key may also be stored verbatim at the top
    level of a locale, which allows sentence-style keys:

        >>> translator = DictTranslator({"en": {"not_even": "Value must be even."}})
        >>> translator.get("not_even")
        'Value must be even.'
        >>> translator.get("unknown.key")
        'unknown.key'

    Lookups fall back to ``fallback`` when the key is missing in the requested
    locale. Unresolved keys are returned unchanged.
    """

    def __init__(
        self,
        lines: Mapping[str, Mapping[str, Any]] | None = None,
        locale: str | None = None,
        fallback: str | None = None,
    ) -> None:
        """Initialize the translator.

        Args:
            lines: Mapping of locale to (nested) message dict. Copied.
            locale: Active locale. Defaults to "en".
            fallback: Locale consulted when a key is missing. Defaults to the
                active locale.
        """
        self._lines: dict[str, dict[str, Any]] = {
            loc: copy.deepcopy(dict(group)) for loc, group in (lines or {}).items()
        }
        self._locale = locale or "en"
        self._fallback = fallback or self._locale

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def fallback(self) -> str:
        return self._fallback

    def set_locale(self, locale: str) -> None:
        self._locale = locale

    def add_lines(self, lines: Mapping[str, Any], locale: str | None = None) -> None:
        """Add messages for a locale.

        Args:
            lines: Mapping of dotted key to message, e.g.
                ``{"validation.even": "The :attribute must be even."}``.
            locale: Target locale. Defaults to the active locale.
        """
        group = self._lines.setdefault(locale or self._locale, {})
        for key, line in lines.items():
            node = group
            *parents, leaf = key.split(".")
            for part in parents:
                child = node.get(part)
                if not isinstance(child, dict):
                    child = {}
                    node[part] = child
                node = child
            node[leaf] = line

    def has(self, key: str, locale: str | None = None) -> bool:
        """Check whether ``key`` resolves in the given locale or the fallback."""
        return self._find(key, locale) is not None

    def get(
        self,
        key: str,
        replace: Mapping[str, Any] | None = None,
        locale: str | None = None,
    ) -> str:
        """Resolve a message key.

        Args:
            key: Dotted message key.
            replace: Placeholder values; ``:name``, ``:Name`` and ``:NAME``
                forms are all substituted.
            locale: Locale to resolve in. Defaults to the active locale.

        Returns:
            The resolved message, or ``key`` when it cannot be resolved.
        """
        line = self._find(key, locale)
        if line is None:
            logger.debug("No translation for %s", key)
            line = key
        return make_replacements(line, replace or {})

    def _find(self, key: str, locale: str | None) -> str | None:
        for loc in dict.fromkeys((locale or self._locale, self._fallback)):
            line = self._lookup(self._lines.get(loc, {}), key)
            if line is not None:
                return line
        return None

    @staticmethod
    def _lookup(group: Mapping[str, Any], key: str) -> str | None:
        line = group.get(key)
        if isinstance(line, str):
            return line

        node: Any = group
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return None
            node = node[part]
        return node if isinstance(node, str) else None
