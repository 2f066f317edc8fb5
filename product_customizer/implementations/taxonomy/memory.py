"""
In-memory taxonomy backend.

For development and testing. Terms are lost on restart.
"""

from collections import defaultdict


class MemoryTaxonomyBackend:
    """In-memory taxonomy term storage."""

    def __init__(self):
        self._terms: dict[str, dict[str, str]] = defaultdict(dict)

    async def term_exists(self, taxonomy: str, slug: str) -> bool:
        """Check if a term exists in the taxonomy."""
        return slug in self._terms.get(taxonomy, {})

    async def insert_term(self, taxonomy: str, slug: str, name: str | None = None) -> None:
        """Create a term."""
        self._terms[taxonomy][slug] = name or slug

    async def list_terms(self, taxonomy: str) -> list[str]:
        """List term slugs of a taxonomy."""
        return list(self._terms.get(taxonomy, {}))

    # ============================================================
    # TEST HELPERS
    # ============================================================

    def seed(self, taxonomy: str, slugs: list[str]) -> None:
        """Seed with existing terms. Useful for testing."""
        for slug in slugs:
            self._terms[taxonomy][slug] = slug
