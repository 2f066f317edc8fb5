"""
Database models.
"""

from .base import Base
from .term import TaxonomyTerm

__all__ = [
    "Base",
    "TaxonomyTerm",
]
