"""
Application configuration using Pydantic Settings.
"""

from functools import lru_cache
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database configuration (taxonomy term storage)."""

    model_config = SettingsConfigDict(env_prefix="DB_")

    url: str = Field(
        default="sqlite+aiosqlite:///./customizer.db",
        description="Async SQLAlchemy connection URL",
    )
    echo: bool = Field(default=False, description="Echo SQL queries")


class CustomizerSettings(BaseSettings):
    """
    Product customizer configuration.

    Host-specific vocabulary lives here so the registry itself only
    deals with declarations.
    """

    model_config = SettingsConfigDict(env_prefix="CUSTOMIZER_")

    # Built-ins never offered again by the type selector
    default_types: list[str] = Field(
        default=["simple", "grouped", "external", "variable", "variation"],
    )

    # Taxonomy
    taxonomy: str = Field(default="product_type")
    taxonomy_backend: str = Field(
        default="memory",
        description="Taxonomy backend: memory, database",
    )

    # Tabs
    default_tab_priority: int = Field(default=21)
    default_panel: str = Field(default="options_panel")

    # Icons
    host_icon_font: str = Field(default="woocommerce")
    generic_icon_font: str = Field(default="Dashicons")
    host_icon_prefix: str = Field(default="woo:")
    tab_css_scope: str = Field(default="#woocommerce-product-data ul.wc-tabs li")

    # Admin screens
    edit_screens: list[str] = Field(default=["post.php", "post-new.php"])
    product_post_type: str = Field(default="product")

    # Contributor discovery
    contributor_group: str = Field(default="product_customizer.contributors")


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Product Customizer")
    app_version: str = Field(default="0.1.0")
    debug: bool = Field(default=False)
    environment: str = Field(default="development")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json", description="json or text")

    # Nested settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    customizer: CustomizerSettings = Field(default_factory=CustomizerSettings)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        allowed = {"development", "staging", "production", "testing"}
        if v not in allowed:
            raise ValueError(f"environment must be one of {allowed}")
        return v

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Shorthand
settings = get_settings()
