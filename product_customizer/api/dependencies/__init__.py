"""
FastAPI dependencies.
"""

from .registry import (
    CurrentRegistry,
    Presenter,
    Screen,
    get_hooks,
    get_presenter,
    get_registry,
    get_screen,
)

__all__ = [
    "CurrentRegistry",
    "Presenter",
    "Screen",
    "get_hooks",
    "get_presenter",
    "get_registry",
    "get_screen",
]
