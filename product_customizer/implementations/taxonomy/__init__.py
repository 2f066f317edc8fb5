"""
Taxonomy backend implementations.
"""

from .memory import MemoryTaxonomyBackend
from .database import DatabaseTaxonomyBackend

__all__ = [
    "MemoryTaxonomyBackend",
    "DatabaseTaxonomyBackend",
]
