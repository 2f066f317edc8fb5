"""
Decorator utilities for contributors.
"""

from typing import Callable, Any

from .manager import (
    hooks,
    HookPriority,
    PRODUCT_TYPES,
    PRODUCT_OPTIONS,
    PRODUCT_TABS,
    panel_action,
)


def product_types(
    func: Callable[..., Any] | None = None,
    *,
    priority: int = HookPriority.NORMAL,
):
    """
    Register a product type contributor.

    Example:
    ```python
    @product_types
    def bundle_type(types: dict) -> dict:
        types["bundle"] = {"name": "Bundle", "extends": ["simple"]}
        return types
    ```
    """
    decorator = hooks.on(PRODUCT_TYPES, priority=priority)
    return decorator(func) if func else decorator


def product_options(
    func: Callable[..., Any] | None = None,
    *,
    priority: int = HookPriority.NORMAL,
):
    """
    Register a product option contributor.

    Example:
    ```python
    @product_options
    def gift_wrap(opts: dict) -> dict:
        opts["gift_wrap"] = {"label": "Gift wrap", "for": "simple"}
        return opts
    ```
    """
    decorator = hooks.on(PRODUCT_OPTIONS, priority=priority)
    return decorator(func) if func else decorator


def product_tabs(
    func: Callable[..., Any] | None = None,
    *,
    priority: int = HookPriority.NORMAL,
):
    """Register a product tab contributor. Tabs are keyed by owner."""
    decorator = hooks.on(PRODUCT_TABS, priority=priority)
    return decorator(func) if func else decorator


def panel(
    tab_key: str,
    *,
    priority: int = HookPriority.NORMAL,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Register a renderer for the body of a tab panel.

    Example:
    ```python
    @panel("bundle_items")
    def bundle_items_panel() -> str:
        return "<p>Bundled items</p>"
    ```
    """
    return hooks.on(panel_action(tab_key), priority=priority)
