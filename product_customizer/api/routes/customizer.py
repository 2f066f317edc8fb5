"""
Product customizer admin routes.

Read-only: everything here is derived from the registry built at startup.
"""

from typing import Any

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, Response

from product_customizer.api.dependencies import CurrentRegistry, Presenter, Screen
from product_customizer.schemas.presentation import (
    PanelDescriptor,
    TabDescriptor,
    VisibilityScript,
)
from product_customizer.schemas.registry import OptionFieldSpec

router = APIRouter()


# ============================================================
# REGISTRY
# ============================================================

@router.get("/types")
async def list_types(registry: CurrentRegistry) -> list[dict[str, Any]]:
    """List registered product types with their resolved visibility."""
    return [
        {
            "slug": declaration.slug,
            "name": declaration.name,
            "extends": list(declaration.extends),
            "visibility_classes": list(declaration.visibility_classes),
            "is_default": registry.is_default_type(slug),
            "has_implementation": registry.implementation_for(slug) is not None,
        }
        for slug, declaration in registry.types.items()
    ]


@router.get("/type-selector")
async def type_selector(presenter: Presenter) -> dict[str, str]:
    """Custom product types for the type selector, keyed by slug."""
    return presenter.type_selector()


@router.get("/options")
async def list_options(registry: CurrentRegistry) -> dict[str, OptionFieldSpec]:
    """Checkbox field specs of the product options."""
    return registry.option_field_specs()


@router.get("/wiring")
async def wiring_plan(registry: CurrentRegistry) -> list[dict[str, str]]:
    """Visibility wiring rules of every option and type."""
    return [rule.to_dict() for rule in registry.visibility_wiring_plan()]


# ============================================================
# RENDERING
# ============================================================

@router.get("/tabs")
async def list_tabs(presenter: Presenter) -> list[TabDescriptor]:
    """Tabs in priority order."""
    return presenter.tab_descriptors()


@router.get("/panels")
async def list_panels(presenter: Presenter) -> list[PanelDescriptor]:
    """Panel containers of the tabs."""
    return await presenter.panel_descriptors()


@router.get("/panels.html", response_class=HTMLResponse)
async def render_panels(presenter: Presenter) -> str:
    return await presenter.render_panels()


@router.get("/styles.css")
async def tab_styles(presenter: Presenter, screen: Screen) -> Response:
    """Tab icon CSS. Empty off the product edit screen."""
    return Response(content=presenter.tab_styles(screen), media_type="text/css")


@router.get("/script")
async def visibility_script(presenter: Presenter, screen: Screen) -> VisibilityScript | None:
    """Visibility wiring for the client script, or null when nothing to wire."""
    return presenter.visibility_script(screen)


@router.get("/script.html", response_class=HTMLResponse)
async def render_script(presenter: Presenter, screen: Screen) -> str:
    return presenter.render_script(screen)
