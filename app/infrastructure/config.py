"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings

from app.domain.value_objects import FilterEncoding


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Database
    database_url: str = "postgresql+asyncpg://catalog:catalog_dev_password@db:5432/catalog"
    create_tables_on_startup: bool = True

    # Authentication (write endpoints only)
    admin_api_key: str = "dev-admin-key-change-in-production"

    # Catalog
    catalog_filter_encoding: FilterEncoding = FilterEncoding.EXPRESSION

    # Logging
    log_level: str = "INFO"

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
