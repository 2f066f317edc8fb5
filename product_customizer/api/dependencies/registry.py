"""
Registry dependencies.
"""

from typing import Annotated

from fastapi import Depends, Query

from product_customizer.core.hooks import HookManager, hooks
from product_customizer.schemas.presentation import ScreenContext
from product_customizer.services.registry import Registry, registry_provider
from product_customizer.services.presentation import AdminPresenter


def get_registry() -> Registry:
    """Get the built registry. Raises RegistryNotInitializedError before startup."""
    return registry_provider.registry


def get_hooks() -> HookManager:
    """Get the hook manager panel renderers are registered on."""
    return hooks


def get_presenter(
    registry: Registry = Depends(get_registry),
    hook_manager: HookManager = Depends(get_hooks),
) -> AdminPresenter:
    return AdminPresenter(registry, hook_manager)


def get_screen(
    page: str = Query(default="", description="Admin page, e.g. post.php"),
    post_type: str | None = Query(default=None),
) -> ScreenContext:
    return ScreenContext(page=page, post_type=post_type)


# Type aliases for cleaner injection
CurrentRegistry = Annotated[Registry, Depends(get_registry)]
Presenter = Annotated[AdminPresenter, Depends(get_presenter)]
Screen = Annotated[ScreenContext, Depends(get_screen)]
