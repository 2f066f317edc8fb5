"""
Taxonomy term model.
"""

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class TaxonomyTerm(Base, TimestampMixin):
    """A term of a taxonomy, e.g. a product type slug."""

    __tablename__ = "taxonomy_terms"
    __table_args__ = (
        UniqueConstraint("taxonomy", "slug", name="uq_taxonomy_terms_taxonomy_slug"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    taxonomy: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    slug: Mapped[str] = mapped_column(String(200), nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)

    def __repr__(self) -> str:
        return f"<TaxonomyTerm {self.taxonomy}:{self.slug}>"
