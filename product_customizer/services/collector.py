"""Declaration collection from contributors."""

from typing import Any, Literal

import structlog

from product_customizer.core.exceptions import TaxonomyTermError
from product_customizer.core.hooks import HookManager, PRODUCT_TYPES, PRODUCT_OPTIONS, PRODUCT_TABS
from product_customizer.core.interfaces import TaxonomyBackend

logger = structlog.get_logger()

Source = Literal["types", "options", "tabs"]

SOURCE_HOOKS: dict[str, str] = {
    "types": PRODUCT_TYPES,
    "options": PRODUCT_OPTIONS,
    "tabs": PRODUCT_TABS,
}


class DeclarationCollector:
    """
    Gathers raw declarations from every contributor.

    Each bag is built by running the contributors as filters over an empty
    mapping, so a later contributor sees, and may overwrite or remove, what
    earlier ones declared.
    """

    def __init__(
        self,
        hooks: HookManager,
        taxonomy: TaxonomyBackend,
        *,
        taxonomy_name: str = "product_type",
    ):
        self.hooks = hooks
        self.taxonomy = taxonomy
        self.taxonomy_name = taxonomy_name

    async def collect(self, source: Source) -> dict[str, Any]:
        """
        Collect one bag of raw declarations, keyed by slug/key/owner.

        For product types, a taxonomy term is ensured for every slug.
        """
        if source not in SOURCE_HOOKS:
            raise ValueError(f"Unknown declaration source: {source}")

        collected = await self.hooks.filter(SOURCE_HOOKS[source], {})
        declarations = {str(key): value for key, value in collected.items()}

        logger.debug("declarations_collected", source=source, count=len(declarations))

        if source == "types":
            await self.ensure_terms(declarations)

        return declarations

    async def ensure_terms(self, types: dict[str, Any]) -> list[str]:
        """
        Create the missing product type terms.

        Idempotent. Storage errors propagate as TaxonomyTermError.

        Returns:
            Slugs of the terms created by this call
        """
        created = []

        for slug, declaration in types.items():
            if not slug:
                continue

            name = None
            if isinstance(declaration, dict) and declaration.get("name"):
                name = str(declaration["name"])

            try:
                if await self.taxonomy.term_exists(self.taxonomy_name, slug):
                    continue
                await self.taxonomy.insert_term(self.taxonomy_name, slug, name)
            except Exception as e:
                logger.error(
                    "taxonomy_term_failed",
                    taxonomy=self.taxonomy_name,
                    slug=slug,
                    error=str(e),
                )
                raise TaxonomyTermError(self.taxonomy_name, slug, e) from e

            created.append(slug)
            logger.info("taxonomy_term_created", taxonomy=self.taxonomy_name, slug=slug)

        return created
