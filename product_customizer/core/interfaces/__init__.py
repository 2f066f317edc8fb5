"""
Core interfaces for the collaborators the customizer does not own.
"""

from .taxonomy import TaxonomyBackend
from .product import ProductRecord

__all__ = [
    "TaxonomyBackend",
    "ProductRecord",
]
