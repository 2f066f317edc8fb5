"""
Schema normalization of the raw declaration bags.

Nothing here raises on bad contributor input: a declaration that cannot be
coerced is logged and left out, the rest of the bag survives.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from product_customizer.schemas.declarations import (
    OptionDeclaration,
    TypeDeclaration,
    tab_list,
)

logger = structlog.get_logger()

M = TypeVar("M", bound=BaseModel)


def _normalize(
    raw: Mapping[str, Any],
    model: type[M],
    key_field: str,
    kind: str,
) -> dict[str, M]:
    normalized: dict[str, M] = {}

    for key, declaration in raw.items():
        if declaration is None:
            declaration = {}

        if not isinstance(declaration, Mapping):
            logger.warning("declaration_dropped", kind=kind, key=key, reason="not a mapping")
            continue

        try:
            # The bag key is authoritative over any key inside the declaration
            normalized[key] = model.model_validate({**declaration, key_field: key})
        except ValidationError as e:
            logger.warning(
                "declaration_dropped",
                kind=kind,
                key=key,
                reason=str(e.errors(include_url=False)),
            )

    return normalized


def normalize_types(raw: Mapping[str, Any]) -> dict[str, TypeDeclaration]:
    """Normalize raw product type declarations keyed by slug."""
    return _normalize(raw, TypeDeclaration, "slug", "type")


def normalize_options(raw: Mapping[str, Any]) -> dict[str, OptionDeclaration]:
    """Normalize raw product option declarations keyed by option key."""
    return _normalize(raw, OptionDeclaration, "key", "option")


def normalize_tab_bag(raw: Mapping[str, Any]) -> dict[str, tuple[dict[str, Any], ...]]:
    """
    Normalize the explicit tabs bag.

    The bag is keyed by owner, each value is one tab or a list of tabs.
    Individual tabs are parsed later, during aggregation.
    """
    return {str(owner): tab_list(tabs) for owner, tabs in raw.items()}
