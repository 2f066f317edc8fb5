"""
Admin presentation of the resolved registry.

Turns the registry into what the host catalog editor renders: type
selector entries, option checkboxes, tabs, panels, tab icon CSS and the
visibility wiring script.
"""

from collections.abc import Mapping
from html import escape
import json
import re

import structlog

from product_customizer.core.config import CustomizerSettings, settings
from product_customizer.core.hooks import HookManager, panel_action
from product_customizer.schemas.presentation import (
    PanelDescriptor,
    ScreenContext,
    TabDescriptor,
    VisibilityScript,
)
from product_customizer.services.registry import Registry

logger = structlog.get_logger()


VISIBILITY_JS = """
jQuery(($) => {
    const toggleVisibility = ($show, $hide, isChecked = true) => {
        $show.toggle(isChecked);
        $hide.toggle(!isChecked);
    };
    const getElements = (action, option) => $(`.${action}_if_${option}`);

    productCustomizerRules.forEach((rule) => {
        $(rule.selector).addClass(rule.class);
    });

    productCustomizerOptions.forEach((opt) => {
        const $checkbox = $(`input#_${opt}`);
        const $showElements = getElements('show', opt);
        const $hideElements = getElements('hide', opt);

        $checkbox.on('change', (e) => toggleVisibility($showElements, $hideElements, $(e.target).prop('checked')));

        toggleVisibility($showElements, $hideElements, $checkbox.prop('checked'));
    });

    $('select#product-type').change();
});
"""


def sanitize_html_class(name: str) -> str:
    """Strip everything but A-Z, a-z, 0-9, _ and - from a class name."""
    name = re.sub(r"%[a-fA-F0-9]{2}", "", name)
    return re.sub(r"[^A-Za-z0-9_-]", "", name)


def _script_json(value) -> str:
    return json.dumps(value).replace("</", "<\\/")


class AdminPresenter:
    """Renders registry artifacts for the product edit screen."""

    def __init__(
        self,
        registry: Registry,
        hooks: HookManager,
        config: CustomizerSettings | None = None,
    ):
        self.registry = registry
        self.hooks = hooks
        self.config = config or settings.customizer

    def is_product_edit_screen(self, screen: ScreenContext) -> bool:
        if screen.page not in self.config.edit_screens:
            return False
        return screen.post_type == self.config.product_post_type

    # ============================================================
    # TYPE SELECTOR AND OPTIONS
    # ============================================================

    def type_selector(self, existing: Mapping[str, str] | None = None) -> dict[str, str]:
        """Host type selector entries plus the custom product types."""
        selector = dict(existing or {})
        for slug in self.registry.type_slugs_excluding_defaults():
            selector[slug] = self.registry.types[slug].name or slug
        return selector

    def option_fields(self, existing: Mapping[str, dict] | None = None) -> dict[str, dict]:
        """Host product type options plus the custom option checkboxes."""
        fields = dict(existing or {})
        for key, spec in self.registry.option_field_specs().items():
            fields[key] = spec.model_dump()
        return fields

    # ============================================================
    # TABS AND PANELS
    # ============================================================

    def tab_descriptors(self) -> list[TabDescriptor]:
        return [
            TabDescriptor(
                key=tab.key,
                id=tab.id,
                target=tab.target,
                classes=list(tab.visibility_classes),
                label=tab.label,
                icon=tab.icon,
                priority=tab.priority,
            )
            for tab in self.registry.tabs_in_priority_order()
        ]

    async def panel_descriptors(self) -> list[PanelDescriptor]:
        """
        Panel containers of every tab, in registration order.

        The panel body is whatever the `product_options.<key>` renderers
        return, joined in hook order.
        """
        panels = []

        for key, tab in self.registry.tabs.items():
            classes = list(dict.fromkeys([*tab.panels, "panel"]))
            classes = [c for c in (sanitize_html_class(c) for c in classes) if c]

            result = await self.hooks.trigger(panel_action(key))
            for source, error in result.errors:
                logger.warning("panel_render_failed", tab=key, source=source, error=str(error))
            content = "".join(str(part) for part in result.results if part is not None)

            panels.append(
                PanelDescriptor(
                    key=key,
                    id=tab.target,
                    classes=classes,
                    content=content,
                )
            )

        return panels

    async def render_panels(self) -> str:
        html = []
        for panel in await self.panel_descriptors():
            html.append(
                f'<div id="{escape(panel.id)}" class="{escape(" ".join(panel.classes))}" '
                f'style="{escape(panel.style)}">{panel.content}</div>'
            )
        return "\n".join(html)

    # ============================================================
    # CSS
    # ============================================================

    def tab_styles(self, screen: ScreenContext) -> str:
        """Icon CSS of every tab carrying an icon. Empty off the edit screen."""
        tabs = [tab for tab in self.registry.tabs.values() if tab.icon]

        if not tabs or not self.is_product_edit_screen(screen):
            return ""

        prefix = self.config.host_icon_prefix
        rules = []

        for tab in tabs:
            if tab.icon.startswith(prefix):
                font, glyph = self.config.host_icon_font, tab.icon[len(prefix):]
            else:
                font, glyph = self.config.generic_icon_font, tab.icon

            rules.append(
                f"{self.config.tab_css_scope}.{escape(tab.key)}_options a::before "
                f'{{ content: "{escape(glyph)}"; font-family: {escape(font)}, sans-serif; }}'
            )

        return "\n".join(rules) + "\n"

    def render_styles(self, screen: ScreenContext) -> str:
        css = self.tab_styles(screen)
        if not css:
            return ""
        return f'<style type="text/css">{css}</style>'

    # ============================================================
    # VISIBILITY SCRIPT
    # ============================================================

    def visibility_script(self, screen: ScreenContext) -> VisibilityScript | None:
        """
        Wiring consumed by the client script.

        None off the edit screen, or when there are no rules or no options.
        """
        if not self.is_product_edit_screen(screen):
            return None

        rules = self.registry.visibility_wiring_plan()
        options = self.registry.option_keys()

        if not rules or not options:
            return None

        return VisibilityScript(
            rules=[rule.to_dict() for rule in rules],
            options=options,
        )

    def render_script(self, screen: ScreenContext) -> str:
        script = self.visibility_script(screen)
        if script is None:
            return ""

        return (
            "<!-- Product Customizer JS -->\n"
            "<script>\n"
            f"var productCustomizerRules = {_script_json(script.rules)};\n"
            f"var productCustomizerOptions = {_script_json(script.options)};\n"
            f"{VISIBILITY_JS}"
            "</script>"
        )
