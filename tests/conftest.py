"""
Pytest fixtures for testing.

Provides:
- A fresh hook manager and in-memory taxonomy per test
- A helper to register declarations and build a registry
- Test client with the registry dependency overridden
- A fake product record
"""

from typing import Any, AsyncGenerator, Callable, Awaitable

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from product_customizer.core.config import CustomizerSettings
from product_customizer.core.hooks import (
    HookManager,
    PRODUCT_OPTIONS,
    PRODUCT_TABS,
    PRODUCT_TYPES,
)
from product_customizer.implementations.taxonomy.memory import MemoryTaxonomyBackend
from product_customizer.services.registry import Registry, build_registry


# ============ Core Fixtures ============


@pytest.fixture
def hook_manager() -> HookManager:
    """Isolated hook manager (the global one is left alone)."""
    return HookManager()


@pytest.fixture
def taxonomy() -> MemoryTaxonomyBackend:
    return MemoryTaxonomyBackend()


@pytest.fixture
def config() -> CustomizerSettings:
    return CustomizerSettings()


def contribute(hook_manager: HookManager, hook_name: str, declarations: dict[str, Any]) -> None:
    """Register a contributor that adds `declarations` to a bag."""

    def contributor(bag: dict) -> dict:
        bag.update(declarations)
        return bag

    hook_manager.register(hook_name, contributor)


BuildRegistry = Callable[..., Awaitable[Registry]]


@pytest.fixture
def build(
    hook_manager: HookManager,
    taxonomy: MemoryTaxonomyBackend,
    config: CustomizerSettings,
) -> BuildRegistry:
    """
    Register one contributor per given bag and build a registry.

    Usage:
        registry = await build(types={"bundle": {"extends": "simple"}})
    """

    async def _build(
        *,
        types: dict[str, Any] | None = None,
        options: dict[str, Any] | None = None,
        tabs: dict[str, Any] | None = None,
    ) -> Registry:
        if types is not None:
            contribute(hook_manager, PRODUCT_TYPES, types)
        if options is not None:
            contribute(hook_manager, PRODUCT_OPTIONS, options)
        if tabs is not None:
            contribute(hook_manager, PRODUCT_TABS, tabs)
        return await build_registry(hook_manager, taxonomy, config)

    return _build


# ============ API Fixtures ============


@pytest_asyncio.fixture
async def make_client(hook_manager: HookManager):
    """
    Test client factory with the registry dependency overridden.

    Usage:
        async with make_client(registry) as client:
            ...
    """
    from contextlib import asynccontextmanager

    from product_customizer.main import app
    from product_customizer.api.dependencies import get_hooks, get_registry

    @asynccontextmanager
    async def _make(registry: Registry | None) -> AsyncGenerator[AsyncClient, None]:
        if registry is not None:
            app.dependency_overrides[get_registry] = lambda: registry
        app.dependency_overrides[get_hooks] = lambda: hook_manager

        try:
            async with AsyncClient(
                transport=ASGITransport(app=app),
                base_url="http://test",
            ) as client:
                yield client
        finally:
            app.dependency_overrides.clear()

    return _make


# ============ Mock Implementations ============


class FakeProduct:
    """Product record with a fixed set of native setters."""

    def __init__(self, native: set[str] | None = None):
        self.native = native or set()
        self.properties: dict[str, str] = {}
        self.meta: dict[str, str] = {}

    def has_native_setter(self, key: str) -> bool:
        return key in self.native

    def set_property(self, key: str, value: str) -> None:
        self.properties[key] = value

    def update_meta(self, key: str, value: str) -> None:
        self.meta[key] = value


class FailingTaxonomyBackend(MemoryTaxonomyBackend):
    """Taxonomy backend whose storage rejects every write."""

    async def insert_term(self, taxonomy: str, slug: str, name: str | None = None) -> None:
        raise RuntimeError("storage unavailable")
