"""
Tests for tab aggregation.
"""

from product_customizer.services.normalizer import (
    normalize_options,
    normalize_tab_bag,
    normalize_types,
)
from product_customizer.services.resolver import resolve_extends
from product_customizer.services.tabs import aggregate_tabs, resolve_tab


def _aggregate(types=None, options=None, tabs=None, **kwargs):
    resolved_types, resolved_options = resolve_extends(
        normalize_types(types or {}),
        normalize_options(options or {}),
    )
    return aggregate_tabs(
        resolved_types,
        resolved_options,
        normalize_tab_bag(tabs or {}),
        **kwargs,
    )


def test_tab_defaults():
    tab = resolve_tab("bundle", {"id": "bundle_items", "label": "Items"})

    assert tab.key == "bundle_items"
    assert tab.priority == 21
    assert tab.panels == ("options_panel",)
    assert tab.target == "bundle_items_product_data"
    assert tab.visibility_classes == ("show_if_bundle",)
    assert tab.icon == ""


def test_tab_alias_key_and_fields():
    tab = resolve_tab("gift_wrap", {
        "id": "wrapping",
        "key": "gift_wrapping",
        "label": "Wrapping",
        "icon": "woo:\\e01d",
        "prio": "5",
        "panel": "shipping_panel, options_panel",
        "for": ["simple"],
    })

    assert tab.key == "gift_wrapping"
    assert tab.id == "wrapping"
    assert tab.target == "wrapping_product_data"
    assert tab.priority == 5
    assert tab.panels == ("shipping_panel", "options_panel")
    assert tab.visibility_classes == ("show_if_simple", "show_if_gift_wrap")


def test_tab_without_key_or_id_is_keyed_by_owner():
    tab = resolve_tab("bundle", {"label": "No id"})

    assert tab.key == "bundle"
    assert tab.id == "bundle"
    assert tab.label == "No id"
    assert tab.target == "bundle_product_data"


def test_unparsable_priority_falls_back_to_default():
    tab = resolve_tab("bundle", {"id": "x", "priority": "high"})

    assert tab.key == "x"
    assert tab.priority == 21


def test_tab_missing_id_survives_aggregation():
    tabs = _aggregate(types={"bundle": {"tabs": [{"label": "No id"}]}})

    assert list(tabs) == ["bundle"]
    assert tabs["bundle"].label == "No id"


def test_inherited_classes_come_first():
    tab = resolve_tab(
        "gift_wrap",
        {"id": "wrapping", "for": ["variable", "simple"]},
        inherited=("show_if_simple",),
    )

    assert tab.visibility_classes == ("show_if_simple", "show_if_variable", "show_if_gift_wrap")


def test_option_tab_follows_option_visibility():
    tabs = _aggregate(options={"gift_wrap": {
        "for": "simple",
        "extends": "bundle",
        "tabs": [{"id": "wrapping", "for": "variable"}],
    }})

    assert tabs["wrapping"].visibility_classes == (
        "show_if_simple",
        "show_if_bundle",
        "show_if_variable",
        "show_if_gift_wrap",
    )


def test_type_tab_follows_extends():
    tabs = _aggregate(types={"bundle": {"extends": ["simple"], "tabs": [{"id": "items"}]}})

    assert tabs["items"].visibility_classes == ("show_if_simple", "show_if_bundle")


def test_explicit_tab_does_not_inherit_owner_visibility():
    tabs = _aggregate(
        options={"gift_wrap": {"for": "simple"}},
        tabs={"gift_wrap": {"id": "wrapping"}},
    )

    assert tabs["wrapping"].visibility_classes == ("show_if_gift_wrap",)


def test_configured_defaults():
    tabs = _aggregate(
        types={"bundle": {"tabs": [{"id": "bundle_items"}]}},
        default_priority=70,
        default_panel="woocommerce_options_panel",
    )

    assert tabs["bundle_items"].priority == 70
    assert tabs["bundle_items"].panels == ("woocommerce_options_panel",)


def test_tabs_from_types_options_and_bag():
    tabs = _aggregate(
        types={"bundle": {"tabs": [{"id": "bundle_items"}]}},
        options={"gift_wrap": {"tabs": {"id": "wrapping"}}},
        tabs={"engraving": [{"id": "engraving_text"}]},
    )

    assert list(tabs) == ["bundle_items", "wrapping", "engraving_text"]
    assert tabs["wrapping"].owner == "gift_wrap"
    assert tabs["engraving_text"].visibility_classes == ("show_if_engraving",)


def test_explicit_tab_replaces_inline_tab_wholesale():
    tabs = _aggregate(
        types={"bundle": {"tabs": [{
            "id": "bundle_items",
            "label": "Items",
            "icon": "woo:\\e01d",
            "prio": 5,
            "for": "simple",
        }]}},
        tabs={"bundle_admin": {"id": "bundle_items", "label": "Bundle items"}},
    )

    tab = tabs["bundle_items"]
    assert tab.label == "Bundle items"
    assert tab.icon == ""
    assert tab.priority == 21
    assert tab.visibility_classes == ("show_if_bundle_admin",)
    assert tab.owner == "bundle_admin"


def test_option_tab_replaces_type_tab():
    tabs = _aggregate(
        types={"bundle": {"tabs": [{"id": "shared", "label": "From type"}]}},
        options={"gift_wrap": {"tabs": [{"id": "shared", "label": "From option"}]}},
    )

    assert tabs["shared"].label == "From option"
    assert tabs["shared"].visibility_classes == ("show_if_gift_wrap",)


def test_aggregation_is_idempotent():
    args = dict(
        types={"bundle": {"tabs": [{"id": "bundle_items", "for": "simple"}]}},
        options={"gift_wrap": {"tabs": [{"id": "wrapping", "key": "wrap"}]}},
        tabs={"bundle": [{"id": "bundle_items", "label": "Override"}]},
    )

    first = _aggregate(**args)
    second = _aggregate(**args)

    assert first == second
    assert [t.model_dump_json() for t in first.values()] == [
        t.model_dump_json() for t in second.values()
    ]
