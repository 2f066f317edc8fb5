"""
Hook system for declaration contributors.
Contributors filter the type, option and tab declarations and render panels.
"""

from .manager import (
    HookManager,
    Hook,
    HookPriority,
    HookResult,
    PRODUCT_TYPES,
    PRODUCT_OPTIONS,
    PRODUCT_TABS,
    panel_action,
    hooks,
)
from .decorators import product_types, product_options, product_tabs, panel

__all__ = [
    "HookManager",
    "Hook",
    "HookPriority",
    "HookResult",
    "PRODUCT_TYPES",
    "PRODUCT_OPTIONS",
    "PRODUCT_TABS",
    "panel_action",
    "hooks",
    "product_types",
    "product_options",
    "product_tabs",
    "panel",
]
