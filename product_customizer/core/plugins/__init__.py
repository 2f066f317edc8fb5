"""
Plugin system for extensibility.
Backend registries and contributor loading.
"""

from .registry import PluginRegistry, taxonomy_backends
from .loader import load_contributors, load_from_entrypoints

__all__ = [
    "PluginRegistry",
    "taxonomy_backends",
    "load_contributors",
    "load_from_entrypoints",
]
