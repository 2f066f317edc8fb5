"""
Resolved product registry.

The registry is built once per process by running the declaration pipeline:

    collect -> normalize -> resolve extends -> aggregate tabs

and is read-only afterwards. `RegistryProvider` owns the one-time build.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping
import asyncio

import structlog

from product_customizer.core.config import CustomizerSettings, settings
from product_customizer.core.exceptions import RegistryNotInitializedError
from product_customizer.core.hooks import HookManager
from product_customizer.core.interfaces import TaxonomyBackend
from product_customizer.schemas.declarations import (
    OptionDeclaration,
    TypeDeclaration,
    bool_to_string,
)
from product_customizer.schemas.registry import (
    OptionFieldSpec,
    ResolvedTab,
    WiringAction,
    WiringRule,
)
from product_customizer.services.collector import DeclarationCollector
from product_customizer.services.normalizer import (
    normalize_options,
    normalize_tab_bag,
    normalize_types,
)
from product_customizer.services.resolver import resolve_extends
from product_customizer.services.tabs import aggregate_tabs

logger = structlog.get_logger()

DEFAULT_TYPES = ("simple", "grouped", "external", "variable", "variation")


def _frozen(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class Registry:
    """
    Immutable result of the declaration pipeline.

    Attributes:
        types: Product types by slug, extends resolved
        options: Product options by key, `for_` holding visibility classes
        tabs: Tabs by key, in registration order
        implementations: Implementation overrides by type slug
    """
    types: Mapping[str, TypeDeclaration]
    options: Mapping[str, OptionDeclaration]
    tabs: Mapping[str, ResolvedTab]
    implementations: Mapping[str, Any] = field(default_factory=dict)
    default_types: tuple[str, ...] = DEFAULT_TYPES

    @classmethod
    def create(
        cls,
        types: Mapping[str, TypeDeclaration],
        options: Mapping[str, OptionDeclaration],
        tabs: Mapping[str, ResolvedTab],
        *,
        default_types: tuple[str, ...] = DEFAULT_TYPES,
    ) -> "Registry":
        """Freeze resolved maps into a registry and derive the overrides."""
        implementations = {
            slug: declaration.implementation
            for slug, declaration in types.items()
            if declaration.implementation is not None
        }
        return cls(
            types=_frozen(types),
            options=_frozen(options),
            tabs=_frozen(tabs),
            implementations=_frozen(implementations),
            default_types=tuple(default_types),
        )

    # ============================================================
    # TYPES
    # ============================================================

    def is_default_type(self, slug: str) -> bool:
        return slug in self.default_types

    def type_slugs_excluding_defaults(self) -> list[str]:
        """Registered type slugs the host does not already provide."""
        return [slug for slug in self.types if not self.is_default_type(slug)]

    def implementation_for(self, slug: str) -> Any | None:
        """Implementation override for a product type, if any."""
        return self.implementations.get(slug)

    def class_name_for(self, slug: str, default: Any) -> Any:
        """Product class to construct for a type: the override, else `default`."""
        return self.implementations.get(slug, default)

    # ============================================================
    # OPTIONS
    # ============================================================

    def option_keys(self) -> list[str]:
        return list(self.options)

    def option_field_specs(self) -> dict[str, OptionFieldSpec]:
        """Checkbox field spec of every option, keyed by option key."""
        return {
            key: OptionFieldSpec(
                id=f"_{key}",
                label=option.label,
                description=option.description,
                default=bool_to_string(option.default),
                wrapper_class=" ".join(option.for_),
            )
            for key, option in self.options.items()
        }

    # ============================================================
    # TABS
    # ============================================================

    def tabs_in_priority_order(self) -> list[ResolvedTab]:
        """Tabs by ascending priority; ties keep registration order."""
        return sorted(self.tabs.values(), key=lambda tab: tab.priority)

    # ============================================================
    # VISIBILITY WIRING
    # ============================================================

    def visibility_wiring_plan(self) -> list[WiringRule]:
        """
        Client-side visibility rules of every option and type.

        `show_groups` and `show_tabs` entries produce a show rule only.
        Each `extends` target produces a show rule and a hide rule, so the
        extending key picks up both what the target shows and what it hides.
        A type and an option sharing a key collapse to the type.
        """
        entries: dict[str, TypeDeclaration | OptionDeclaration] = {
            **self.options,
            **self.types,
        }
        rules: list[WiringRule] = []

        for key, declaration in entries.items():
            rules.extend(
                WiringRule(action=WiringAction.SHOW, selector=f".options_group.{group}", key=key)
                for group in declaration.show_groups
            )
            rules.extend(
                WiringRule(action=WiringAction.SHOW, selector=f".{tab}_options", key=key)
                for tab in declaration.show_tabs
            )
            rules.extend(
                WiringRule(action=WiringAction.SHOW, selector=f".show_if_{target}", key=key)
                for target in declaration.extends
            )
            rules.extend(
                WiringRule(action=WiringAction.HIDE, selector=f".hide_if_{target}", key=key)
                for target in declaration.extends
            )

        return rules


async def build_registry(
    hooks: HookManager,
    taxonomy: TaxonomyBackend,
    config: CustomizerSettings | None = None,
) -> Registry:
    """Run the declaration pipeline once and freeze the result."""
    config = config or settings.customizer

    collector = DeclarationCollector(hooks, taxonomy, taxonomy_name=config.taxonomy)

    types = normalize_types(await collector.collect("types"))
    options = normalize_options(await collector.collect("options"))
    tab_bag = normalize_tab_bag(await collector.collect("tabs"))

    types, options = resolve_extends(types, options)

    tabs = aggregate_tabs(
        types,
        options,
        tab_bag,
        default_priority=config.default_tab_priority,
        default_panel=config.default_panel,
    )

    registry = Registry.create(
        types,
        options,
        tabs,
        default_types=tuple(config.default_types),
    )

    logger.info(
        "registry_built",
        types=len(registry.types),
        options=len(registry.options),
        tabs=len(registry.tabs),
    )

    return registry


class RegistryProvider:
    """
    Holds the process-wide registry.

    The first `get_or_build` call builds it; concurrent callers wait on the
    same lock and get the same instance.
    """

    def __init__(self):
        self._registry: Registry | None = None
        self._lock = asyncio.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._registry is not None

    @property
    def registry(self) -> Registry:
        """The built registry. Raises if the build has not run yet."""
        if self._registry is None:
            raise RegistryNotInitializedError()
        return self._registry

    async def get_or_build(
        self,
        hooks: HookManager,
        taxonomy: TaxonomyBackend,
        config: CustomizerSettings | None = None,
    ) -> Registry:
        if self._registry is not None:
            return self._registry

        async with self._lock:
            if self._registry is None:
                self._registry = await build_registry(hooks, taxonomy, config)

        return self._registry

    def reset(self) -> None:
        """Drop the built registry. For tests only."""
        self._registry = None


# Global registry provider
registry_provider = RegistryProvider()


def get_registry() -> Registry:
    """Get the process-wide registry."""
    return registry_provider.registry
