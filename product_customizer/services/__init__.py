"""
Customizer services: the declaration pipeline, the resolved registry and
its consumers.
"""

from .collector import DeclarationCollector
from .registry import (
    Registry,
    RegistryProvider,
    build_registry,
    get_registry,
    registry_provider,
)
from .persistence import save_options
from .presentation import AdminPresenter

__all__ = [
    "DeclarationCollector",
    "Registry",
    "RegistryProvider",
    "build_registry",
    "get_registry",
    "registry_provider",
    "save_options",
    "AdminPresenter",
]
