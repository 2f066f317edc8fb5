"""
Hook manager for declaration filters and render actions.
"""
from __future__ import annotations

from typing import Callable, Any
from dataclasses import dataclass, field
from enum import IntEnum
from collections import defaultdict
import inspect
import logging

logger = logging.getLogger(__name__)


# Registration interface
PRODUCT_TYPES = "product.types"
PRODUCT_OPTIONS = "product.options"
PRODUCT_TABS = "product.tabs"


def panel_action(tab_key: str) -> str:
    """Action fired while rendering the panel of a tab."""
    return f"product_options.{tab_key}"


class HookPriority(IntEnum):
    """Hook execution priority (lower runs first)."""
    FIRST = 0
    EARLY = 25
    NORMAL = 50
    LATE = 75
    LAST = 100


@dataclass
class Hook:
    """Registered hook information."""
    name: str
    handler: Callable[..., Any]
    priority: int = HookPriority.NORMAL
    source: str = ""  # Contributor that registered this


@dataclass
class HookResult:
    """Result from running action hooks."""
    hook_name: str
    results: list[Any] = field(default_factory=list)
    errors: list[tuple[str, Exception]] = field(default_factory=list)


async def _call(handler: Callable[..., Any], *args, **kwargs) -> Any:
    """Call a plain or async handler."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result


class HookManager:
    """
    Manages the customizer extension points.

    Filters:
    - product.types: mapping of slug -> type declaration
    - product.options: mapping of key -> option declaration
    - product.tabs: mapping of owner -> tab declaration(s)

    Actions:
    - product_options.<tab key>: render the body of a tab panel

    Example usage:
    ```python
    hooks = HookManager()

    @hooks.on("product.types")
    def add_bundle(types: dict) -> dict:
        types["bundle"] = {"name": "Bundle", "extends": "simple"}
        return types

    types = await hooks.filter("product.types", {})
    ```
    """

    def __init__(self):
        self._hooks: dict[str, list[Hook]] = defaultdict(list)

    def register(
        self,
        name: str,
        handler: Callable[..., Any],
        *,
        priority: int = HookPriority.NORMAL,
        source: str = "",
    ) -> Hook:
        """Register a hook handler."""
        hook = Hook(
            name=name,
            handler=handler,
            priority=priority,
            source=source,
        )

        self._hooks[name].append(hook)
        # Stable: equal priorities keep registration order
        self._hooks[name].sort(key=lambda h: h.priority)

        logger.debug(f"Registered hook: {name} (priority={priority})")
        return hook

    def unregister(self, name: str, handler: Callable) -> bool:
        """Unregister a hook handler."""
        hooks = self._hooks.get(name, [])
        for i, hook in enumerate(hooks):
            if hook.handler is handler:
                del hooks[i]
                return True
        return False

    def on(
        self,
        name: str,
        *,
        priority: int = HookPriority.NORMAL,
        source: str = "",
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator to register a hook handler."""
        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.register(name, func, priority=priority, source=source)
            return func
        return decorator

    async def trigger(
        self,
        name: str,
        *args,
        **kwargs,
    ) -> HookResult:
        """
        Trigger all handlers for an action.

        Errors are collected on the result, the remaining handlers still run.
        """
        result = HookResult(hook_name=name)

        for hook in list(self._hooks.get(name, [])):
            try:
                result.results.append(await _call(hook.handler, *args, **kwargs))
            except Exception as e:
                result.errors.append((hook.source or str(hook.handler), e))
                logger.error(f"Hook {name} handler error: {e}")

        return result

    async def filter(
        self,
        name: str,
        value: Any,
        *args,
        **kwargs,
    ) -> Any:
        """
        Run hooks as filters, passing value through each handler.

        Each handler receives the value from the previous handler
        and should return the (possibly modified) value. A handler that
        raises, or returns a value of another type, is skipped.
        """
        for hook in list(self._hooks.get(name, [])):
            try:
                filtered = await _call(hook.handler, value, *args, **kwargs)
            except Exception as e:
                logger.error(f"Filter hook {name} error: {e}")
                continue

            if value is not None and not isinstance(filtered, type(value)):
                logger.warning(
                    f"Filter hook {name} returned {type(filtered).__name__}, "
                    f"expected {type(value).__name__}; ignored"
                )
                continue

            value = filtered

        return value

    def has_hooks(self, name: str) -> bool:
        """Check if any hooks are registered for name."""
        return bool(self._hooks.get(name))

    def list_hooks(self, name: str | None = None) -> list[str]:
        """List registered hook names, optionally filtered by prefix."""
        names = list(self._hooks.keys())
        if name:
            names = [n for n in names if n.startswith(name)]
        return sorted(names)

    def clear(self, name: str | None = None) -> None:
        """Clear hooks. If name given, clear only that hook."""
        if name:
            self._hooks.pop(name, None)
        else:
            self._hooks.clear()


# Global hook manager instance
hooks = HookManager()
