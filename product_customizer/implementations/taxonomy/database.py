"""
Database taxonomy backend.

Persists product type terms with SQLAlchemy.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from product_customizer.models.term import TaxonomyTerm


class DatabaseTaxonomyBackend:
    """
    SQL-backed taxonomy term storage.

    Opens its own sessions since terms are written during the registry
    build, outside of any request.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def term_exists(self, taxonomy: str, slug: str) -> bool:
        """Check if a term exists in the taxonomy."""
        query = select(TaxonomyTerm.id).where(
            TaxonomyTerm.taxonomy == taxonomy,
            TaxonomyTerm.slug == slug,
        )
        async with self.session_factory() as session:
            result = await session.execute(query)
            return result.scalar_one_or_none() is not None

    async def insert_term(self, taxonomy: str, slug: str, name: str | None = None) -> None:
        """Create a term."""
        async with self.session_factory() as session:
            try:
                session.add(TaxonomyTerm(taxonomy=taxonomy, slug=slug, name=name or slug))
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def list_terms(self, taxonomy: str) -> list[str]:
        """List term slugs of a taxonomy."""
        query = (
            select(TaxonomyTerm.slug)
            .where(TaxonomyTerm.taxonomy == taxonomy)
            .order_by(TaxonomyTerm.id)
        )
        async with self.session_factory() as session:
            result = await session.execute(query)
            return list(result.scalars().all())
