"""
Customizer exceptions.
"""


class CustomizerError(Exception):
    """Base error for the product customizer."""
    pass


class RegistryNotInitializedError(CustomizerError):
    """Raised when the resolved registry is read before it was built."""

    def __init__(self, message: str = "Product registry not initialized"):
        super().__init__(message)


class TaxonomyTermError(CustomizerError):
    """Raised when a product type term cannot be persisted."""

    def __init__(self, taxonomy: str, slug: str, cause: Exception | None = None):
        self.taxonomy = taxonomy
        self.slug = slug
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Could not create term '{slug}' in '{taxonomy}'{detail}")
