"""
Tests for backend registration and contributor loading.
"""

import pytest

from product_customizer.core.hooks import HookManager, PRODUCT_TYPES
from product_customizer.core.plugins import PluginRegistry, load_contributors, load_from_entrypoints
from product_customizer.core.plugins.registry import taxonomy_backends
from product_customizer.implementations.register import register_backends
from product_customizer.implementations.taxonomy import MemoryTaxonomyBackend


# ============ Plugin Registry ============


def test_plugin_registry_default_and_cache():
    registry = PluginRegistry[object]("test")
    registry.register("a", object)
    registry.register("b", object, default=True)

    assert registry.default == "b"
    assert registry.list() == ["a", "b"]
    assert registry.get() is registry.get("b")
    assert registry.get("b", cached=False) is not registry.get("b")


def test_plugin_registry_unknown_backend():
    registry = PluginRegistry[object]("test")

    with pytest.raises(ValueError):
        registry.get()

    registry.register("a", object)
    with pytest.raises(ValueError, match="Available: a"):
        registry.get("missing")


def test_plugin_registry_unregister_moves_default():
    registry = PluginRegistry[object]("test")
    registry.register("a", object, default=True)
    registry.register("b", object)

    assert registry.unregister("a") is True
    assert registry.default == "b"
    assert registry.unregister("a") is False


def test_register_backends():
    register_backends()

    assert taxonomy_backends.has("memory")
    assert taxonomy_backends.has("database")
    assert taxonomy_backends.default == "memory"
    assert isinstance(taxonomy_backends.get("memory"), MemoryTaxonomyBackend)


# ============ Contributors ============


def test_load_contributors_skips_failures(hook_manager: HookManager):
    def bundles(hooks: HookManager) -> None:
        hooks.register(PRODUCT_TYPES, lambda types: {**types, "bundle": {}})

    def broken(hooks: HookManager) -> None:
        raise RuntimeError("boom")

    loaded = load_contributors(hook_manager, [broken, bundles])

    assert loaded == ["test_load_contributors_skips_failures.<locals>.bundles"]
    assert hook_manager.has_hooks(PRODUCT_TYPES)


def test_load_from_entrypoints(monkeypatch, hook_manager: HookManager):
    class FakeEntryPoint:
        def __init__(self, name, target):
            self.name = name
            self._target = target

        def load(self):
            if isinstance(self._target, Exception):
                raise self._target
            return self._target

    def register(hooks: HookManager) -> None:
        hooks.register(PRODUCT_TYPES, lambda types: types)

    points = [
        FakeEntryPoint("bundles", register),
        FakeEntryPoint("missing", ImportError("no module")),
    ]
    monkeypatch.setattr(
        "product_customizer.core.plugins.loader.entry_points",
        lambda group: points if group == "product_customizer.contributors" else [],
    )

    loaded = load_from_entrypoints(hook_manager, "product_customizer.contributors")

    assert loaded == ["bundles"]
    assert hook_manager.list_hooks("product.") == [PRODUCT_TYPES]
