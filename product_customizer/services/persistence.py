"""Saving product option checkboxes onto a product record."""

from collections.abc import Mapping
from typing import Any

import structlog

from product_customizer.core.interfaces import ProductRecord
from product_customizer.schemas.declarations import bool_to_string
from product_customizer.services.registry import Registry

logger = structlog.get_logger()

# Value a checked checkbox submits
CHECKED = "on"


def field_name(option_key: str) -> str:
    """Form field and metadata key of an option."""
    return f"_{option_key}"


def save_options(
    registry: Registry,
    product: ProductRecord,
    submitted: Mapping[str, Any],
) -> dict[str, str]:
    """
    Write every option's submitted checkbox state onto the product.

    Only "on" counts as checked, a missing checkbox is unchecked. Values are
    stored as "yes"/"no": through the native setter when the option is a
    native property or the product has a setter for it, as metadata
    under `_<key>` otherwise.

    Returns:
        The written value of each option, keyed by option key
    """
    written: dict[str, str] = {}

    for key, option in registry.options.items():
        value = bool_to_string(submitted.get(field_name(key), "no") == CHECKED)

        if option.is_native_property or product.has_native_setter(key):
            product.set_property(key, value)
        else:
            product.update_meta(field_name(key), value)

        written[key] = value

    logger.debug("product_options_saved", options=written)
    return written
