"""
Taxonomy backend protocol.
Implementations: MemoryTaxonomyBackend, DatabaseTaxonomyBackend
"""
from __future__ import annotations

from typing import Protocol


class TaxonomyBackend(Protocol):
    """
    Protocol for the storage of taxonomy terms.

    Each registered product type slug is persisted as one term of the
    product type taxonomy. Terms are created, never removed.
    """

    async def term_exists(self, taxonomy: str, slug: str) -> bool:
        """Check if a term exists in the taxonomy."""
        ...

    async def insert_term(self, taxonomy: str, slug: str, name: str | None = None) -> None:
        """Create a term. Raise on storage failure."""
        ...

    async def list_terms(self, taxonomy: str) -> list[str]:
        """List term slugs of a taxonomy."""
        ...
