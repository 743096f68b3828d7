"""Name -> factory lookup with lazy imports of built-in implementations.

Sorters and recognizers are both chosen by name from configuration. Each
kind subclasses LazyRegistry with its own built-in table and aliases.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable
from typing import Any, ClassVar

from readorder.exceptions import InvalidConfigError

logger = logging.getLogger(__name__)

__all__ = ["LazyRegistry"]


class LazyRegistry:
    """Maps names to classes or factories, importing built-ins on first use.

    Subclasses set:
        kind: Word used in log and error messages ("sorter", "recognizer")
        builtin: name -> (module path, attribute)
        aliases: alternative name -> canonical name
    """

    kind: ClassVar[str] = "component"
    builtin: ClassVar[dict[str, tuple[str, str]]] = {}
    aliases: ClassVar[dict[str, str]] = {}

    def __init__(self) -> None:
        self._registered: dict[str, Callable[..., Any]] = {}
        self._imported: dict[str, Callable[..., Any]] = {}

    def resolve_name(self, name: str) -> str:
        """Canonical name for ``name`` (case-insensitive, aliases applied)."""
        key = name.strip().lower()
        return self.aliases.get(key, key)

    def register(self, name: str, factory: Callable[..., Any]) -> None:
        """Add an implementation, or replace a built-in one.

        Args:
            name: Lookup name
            factory: Class or any callable returning an instance
        """
        key = self.resolve_name(name)
        if key in self.builtin:
            logger.warning("Custom %s '%s' replaces the built-in one", self.kind, key)
        self._registered[key] = factory
        logger.debug("Registered %s '%s'", self.kind, key)

    def get_class(self, name: str) -> Callable[..., Any]:
        """Look up the factory for a name, importing built-ins on demand.

        Raises:
            InvalidConfigError: If the name is unknown or its module fails to import
        """
        key = self.resolve_name(name)
        factory = self._registered.get(key) or self._imported.get(key)
        if factory is not None:
            return factory

        target = self.builtin.get(key)
        if target is None:
            choices = ", ".join(self.list_available())
            raise InvalidConfigError(f"Unknown {self.kind}: '{name}'. Choose one of: {choices}")

        module_name, attribute = target
        try:
            factory = getattr(importlib.import_module(module_name), attribute)
        except (ImportError, AttributeError) as e:
            raise InvalidConfigError(f"The {self.kind} '{key}' could not be loaded: {e}") from e

        self._imported[key] = factory
        return factory

    def create(self, name: str, **kwargs: Any) -> Any:
        """Instantiate the implementation registered under ``name``."""
        return self.get_class(name)(**kwargs)

    def list_available(self) -> list[str]:
        """Canonical names of every known implementation, sorted."""
        return sorted({*self.builtin, *self._registered})

    def is_available(self, name: str) -> bool:
        """Whether a name is known. Nothing is imported."""
        key = self.resolve_name(name)
        return key in self.builtin or key in self._registered

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_available(name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(self.list_available())})"
