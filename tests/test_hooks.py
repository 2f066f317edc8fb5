"""
Tests for the hook manager filters and actions.
"""

import pytest

from product_customizer.core.hooks import (
    HookManager,
    HookPriority,
    PRODUCT_OPTIONS,
    PRODUCT_TABS,
    PRODUCT_TYPES,
    hooks,
    panel,
    panel_action,
    product_options,
    product_tabs,
    product_types,
)


@pytest.mark.asyncio
async def test_filter_without_handlers_returns_value(hook_manager: HookManager):
    assert await hook_manager.filter(PRODUCT_TYPES, {}) == {}


@pytest.mark.asyncio
async def test_filter_accumulates_in_registration_order(hook_manager: HookManager):
    """Each contributor sees what earlier ones declared."""
    seen = []

    def first(types: dict) -> dict:
        seen.append(set(types))
        types["a"] = {}
        return types

    def second(types: dict) -> dict:
        seen.append(set(types))
        types["b"] = {}
        return types

    hook_manager.register(PRODUCT_TYPES, first)
    hook_manager.register(PRODUCT_TYPES, second)

    result = await hook_manager.filter(PRODUCT_TYPES, {})

    assert list(result) == ["a", "b"]
    assert seen == [set(), {"a"}]


@pytest.mark.asyncio
async def test_filter_priority_runs_lower_first(hook_manager: HookManager):
    order = []

    @hook_manager.on(PRODUCT_TYPES, priority=HookPriority.LATE)
    def late(types: dict) -> dict:
        order.append("late")
        return types

    @hook_manager.on(PRODUCT_TYPES, priority=HookPriority.EARLY)
    def early(types: dict) -> dict:
        order.append("early")
        return types

    await hook_manager.filter(PRODUCT_TYPES, {})

    assert order == ["early", "late"]


@pytest.mark.asyncio
async def test_filter_accepts_async_handlers(hook_manager: HookManager):
    async def contributor(types: dict) -> dict:
        types["bundle"] = {"name": "Bundle"}
        return types

    hook_manager.register(PRODUCT_TYPES, contributor)

    assert await hook_manager.filter(PRODUCT_TYPES, {}) == {"bundle": {"name": "Bundle"}}


@pytest.mark.asyncio
async def test_filter_skips_failing_contributor(hook_manager: HookManager):
    """A contributor that raises does not break the others."""

    def good(types: dict) -> dict:
        types["good"] = {}
        return types

    def broken(types: dict) -> dict:
        raise KeyError("boom")

    def later(types: dict) -> dict:
        types["later"] = {}
        return types

    for handler in (good, broken, later):
        hook_manager.register(PRODUCT_TYPES, handler)

    assert list(await hook_manager.filter(PRODUCT_TYPES, {})) == ["good", "later"]


@pytest.mark.asyncio
async def test_filter_ignores_wrong_return_type(hook_manager: HookManager):
    def good(types: dict) -> dict:
        types["good"] = {}
        return types

    def forgot_return(types: dict) -> None:
        types["side_effect"] = {}

    hook_manager.register(PRODUCT_TYPES, good)
    hook_manager.register(PRODUCT_TYPES, forgot_return)

    result = await hook_manager.filter(PRODUCT_TYPES, {})

    assert "good" in result


@pytest.mark.asyncio
async def test_trigger_collects_results_and_errors(hook_manager: HookManager):
    hook_manager.register("product_options.bundle", lambda: "<p>one</p>")
    hook_manager.register("product_options.bundle", lambda: 1 / 0, source="broken")
    hook_manager.register("product_options.bundle", lambda: "<p>two</p>")

    result = await hook_manager.trigger("product_options.bundle")

    assert result.results == ["<p>one</p>", "<p>two</p>"]
    assert [source for source, _ in result.errors] == ["broken"]


def test_unregister_and_clear(hook_manager: HookManager):
    def handler(types: dict) -> dict:
        return types

    hook_manager.register(PRODUCT_TYPES, handler)
    assert hook_manager.has_hooks(PRODUCT_TYPES)
    assert hook_manager.list_hooks("product.") == [PRODUCT_TYPES]

    assert hook_manager.unregister(PRODUCT_TYPES, handler) is True
    assert hook_manager.unregister(PRODUCT_TYPES, handler) is False

    hook_manager.register(PRODUCT_TYPES, handler)
    hook_manager.clear()
    assert not hook_manager.has_hooks(PRODUCT_TYPES)


# ============ Decorators ============


@pytest.fixture
def global_hooks():
    hooks.clear()
    yield hooks
    hooks.clear()


@pytest.mark.asyncio
async def test_decorators_register_on_global_hooks(global_hooks: HookManager):
    @product_types
    def bundle_type(types: dict) -> dict:
        types["bundle"] = {"name": "Bundle"}
        return types

    @product_options(priority=HookPriority.LATE)
    def gift_wrap(opts: dict) -> dict:
        opts["gift_wrap"] = {"for": "simple"}
        return opts

    @product_tabs
    def bundle_tabs(tabs: dict) -> dict:
        tabs["bundle"] = {"id": "bundle_items"}
        return tabs

    @panel("bundle_items")
    def bundle_items_panel() -> str:
        return "<p>Items</p>"

    assert bundle_type.__name__ == "bundle_type"
    assert await global_hooks.filter(PRODUCT_TYPES, {}) == {"bundle": {"name": "Bundle"}}
    assert await global_hooks.filter(PRODUCT_OPTIONS, {}) == {"gift_wrap": {"for": "simple"}}
    assert await global_hooks.filter(PRODUCT_TABS, {}) == {"bundle": {"id": "bundle_items"}}

    result = await global_hooks.trigger(panel_action("bundle_items"))
    assert result.results == ["<p>Items</p>"]
