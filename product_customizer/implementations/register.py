"""
Register all backend implementations with their registries.

Import this module in app startup to register all implementations.
"""

from product_customizer.core.plugins.registry import taxonomy_backends


def register_backends() -> None:
    """Register all backend implementations."""

    # ============ Taxonomy Backends ============

    def create_memory_taxonomy(**config):
        from product_customizer.implementations.taxonomy.memory import MemoryTaxonomyBackend
        return MemoryTaxonomyBackend()

    def create_database_taxonomy(**config):
        from product_customizer.implementations.taxonomy.database import DatabaseTaxonomyBackend
        from product_customizer.models.database import async_session_factory
        return DatabaseTaxonomyBackend(
            config.get("session_factory", async_session_factory),
        )

    taxonomy_backends.register("memory", create_memory_taxonomy, default=True)
    taxonomy_backends.register("database", create_database_taxonomy)
