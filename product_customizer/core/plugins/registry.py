"""
Backend registry for swappable implementations.
"""
from __future__ import annotations

from typing import TypeVar, Generic, Callable, Any
import logging

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PluginRegistry(Generic[T]):
    """
    Generic registry for backend implementations.

    Example usage:
    ```python
    taxonomy_backends = PluginRegistry[TaxonomyBackend]("taxonomy")
    taxonomy_backends.register("memory", MemoryTaxonomyBackend, default=True)

    backend = taxonomy_backends.get("memory")
    ```
    """

    def __init__(self, name: str):
        self.name = name
        self._factories: dict[str, Callable[..., T]] = {}
        self._instances: dict[str, T] = {}
        self._default: str | None = None

    def register(
        self,
        name: str,
        factory: Callable[..., T],
        *,
        default: bool = False,
    ) -> None:
        """
        Register a backend implementation.

        Args:
            name: Unique identifier for this implementation
            factory: Callable that creates the implementation
            default: Set as default implementation
        """
        if name in self._factories:
            logger.warning(f"Overwriting existing {self.name} backend: {name}")

        self._factories[name] = factory
        self._instances.pop(name, None)

        if default or self._default is None:
            self._default = name

        logger.info(f"Registered {self.name} backend: {name}")

    def unregister(self, name: str) -> bool:
        """Unregister a backend."""
        if name in self._factories:
            del self._factories[name]
            self._instances.pop(name, None)
            if name == self._default:
                self._default = next(iter(self._factories), None)
            return True
        return False

    def get(
        self,
        name: str | None = None,
        *,
        config: dict[str, Any] | None = None,
        cached: bool = True,
    ) -> T:
        """
        Get a backend implementation.

        Args:
            name: Backend name (uses default if not specified)
            config: Configuration to pass to factory
            cached: Return cached instance if available
        """
        name = name or self._default

        if name is None:
            raise ValueError(f"No {self.name} backend registered")

        if name not in self._factories:
            available = ", ".join(self._factories.keys())
            raise ValueError(
                f"Unknown {self.name} backend: {name}. "
                f"Available: {available}"
            )

        if cached and not config and name in self._instances:
            return self._instances[name]

        instance = self._factories[name](**(config or {}))

        if cached and not config:
            self._instances[name] = instance

        return instance

    def list(self) -> list[str]:
        """List all registered backend names."""
        return list(self._factories.keys())

    def has(self, name: str) -> bool:
        """Check if backend is registered."""
        return name in self._factories

    @property
    def default(self) -> str | None:
        """Get default backend name."""
        return self._default


# Global registry for taxonomy term storage
taxonomy_backends = PluginRegistry[Any]("taxonomy")
