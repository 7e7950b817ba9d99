"""Class-level registry of validation engines.

An engine is a class implementing ``ValidatorProtocol``. Engines are
registered under a name and looked up by that name (or the configured
default) whenever a rule asks for a validation session. Subclasses own the
registry dict and decide which engine is registered out of the box.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

T = TypeVar("T")


class PluginFactory(ABC, Generic[T]):
    """Named registry that builds sessions from registered engine classes.

    Subclasses define:
        - _registry: name -> engine class, owned by the subclass
        - _default_type: name used when none is given
        - _entity_name: label for error messages, e.g. "validation engine"
        - _ensure_defaults_registered(): installs the built-in engine

    Built-in engines are installed lazily, so a registry cleared in a test
    fixture repopulates itself on the next lookup. A host may register its
    own engine under the default name to replace the built-in one.
    """

    _registry: ClassVar[dict[str, type[Any]]]
    _default_type: ClassVar[str]
    _entity_name: ClassVar[str]

    @classmethod
    @abstractmethod
    def _ensure_defaults_registered(cls) -> None:
        """Install the built-in engine if nothing occupies its name."""
        ...

    @classmethod
    def register(cls, name: str, engine_class: type[T]) -> None:
        """Register ``engine_class`` under ``name``, replacing any previous one."""
        cls._registry[name] = engine_class

    @classmethod
    def unregister(cls, name: str) -> None:
        """Forget the engine registered under ``name``.

        Unregistering the default name restores the built-in engine on the
        next lookup.
        """
        cls._registry.pop(name, None)

    @classmethod
    def resolve(cls, name: str | None = None) -> type[T]:
        """Look up the engine class registered under ``name``.

        Raises:
            ValueError: If no engine is registered under that name.
        """
        cls._ensure_defaults_registered()

        engine_name = name if name is not None else cls._default_type

        if engine_name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys()))
            raise ValueError(
                f"Unknown {cls._entity_name} type: {engine_name}. Available types: {available}"
            )

        return cls._registry[engine_name]

    @classmethod
    def create(cls, name: str | None = None, **kwargs: Any) -> T:
        """Start a session on the engine registered under ``name``.

        Keyword arguments are passed to the engine constructor as-is.
        """
        engine_class = cls.resolve(name)
        return engine_class(**kwargs)  # type: ignore[no-any-return]

    @classmethod
    def available_types(cls) -> list[str]:
        """Names of every registered engine, built-ins included."""
        cls._ensure_defaults_registered()
        return sorted(cls._registry.keys())

    @classmethod
    def clear_registry(cls) -> None:
        cls._registry.clear()
