"""
Tab aggregation.

Tabs come from three places: inline on product types, inline on product
options and the explicit tabs bag. All three are keyed by owner. They are
applied in that order and keyed by `key ?? id`, falling back to the owner,
so an explicit tab replaces an inline one with the same key.
"""

from collections.abc import Iterable, Mapping
from typing import Any

import structlog
from pydantic import ValidationError

from product_customizer.schemas.declarations import (
    OptionDeclaration,
    TabDeclaration,
    TypeDeclaration,
    unique,
    visibility_class,
)
from product_customizer.schemas.registry import ResolvedTab

logger = structlog.get_logger()

DEFAULT_TAB_PRIORITY = 21
DEFAULT_PANEL = "options_panel"


def tab_target(tab_id: str) -> str:
    """DOM id of the panel a tab opens."""
    return f"{tab_id}_product_data"


def resolve_tab(
    owner: str,
    raw: Mapping[str, Any],
    *,
    inherited: Iterable[str] = (),
    default_priority: int = DEFAULT_TAB_PRIORITY,
    default_panel: str = DEFAULT_PANEL,
) -> ResolvedTab | None:
    """
    Resolve one declared tab of an owner.

    `inherited` holds the owner's resolved visibility classes. The tab is
    shown with them, with its own `for` targets and with its owner.
    A tab without key and id is keyed by its owner.

    Returns None when the tab cannot be coerced.
    """
    try:
        tab = TabDeclaration.model_validate(raw)
    except ValidationError as e:
        logger.warning(
            "tab_dropped",
            owner=owner,
            reason=str(e.errors(include_url=False)),
        )
        return None

    key = tab.resolved_key
    if not key:
        logger.debug("tab_keyed_by_owner", owner=owner)
        key = owner

    tab_id = tab.id or key

    return ResolvedTab(
        key=key,
        id=tab_id,
        label=tab.label,
        icon=tab.icon,
        priority=default_priority if tab.priority is None else tab.priority,
        panels=tab.panel or (default_panel,),
        visibility_classes=unique([
            *inherited,
            *(visibility_class(target) for target in (*tab.for_, owner)),
        ]),
        target=tab_target(tab_id),
        owner=owner,
    )


def _sources(
    types: Mapping[str, TypeDeclaration],
    options: Mapping[str, OptionDeclaration],
    explicit: Mapping[str, Iterable[Mapping[str, Any]]],
) -> Iterable[tuple[str, tuple[str, ...], Iterable[Mapping[str, Any]]]]:
    for slug, declaration in types.items():
        yield slug, declaration.visibility_classes, declaration.tabs
    for key, declaration in options.items():
        yield key, declaration.for_, declaration.tabs
    for owner, declared in explicit.items():
        yield owner, (), declared


def aggregate_tabs(
    types: Mapping[str, TypeDeclaration],
    options: Mapping[str, OptionDeclaration],
    explicit: Mapping[str, Iterable[Mapping[str, Any]]],
    *,
    default_priority: int = DEFAULT_TAB_PRIORITY,
    default_panel: str = DEFAULT_PANEL,
) -> dict[str, ResolvedTab]:
    """
    Merge all declared tabs into one map keyed by tab key.

    Last write wins, wholesale: no field of a replaced tab survives.
    """
    tabs: dict[str, ResolvedTab] = {}

    for owner, inherited, declared in _sources(types, options, explicit):
        for raw in declared:
            tab = resolve_tab(
                owner,
                raw,
                inherited=inherited,
                default_priority=default_priority,
                default_panel=default_panel,
            )
            if tab is None:
                continue

            if tab.key in tabs:
                logger.debug(
                    "tab_replaced",
                    key=tab.key,
                    previous_owner=tabs[tab.key].owner,
                    owner=owner,
                )

            tabs[tab.key] = tab

    return tabs
