"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    api_prefix: str = "/api"
    debug: bool = False

    # Database
    database_url: str = "postgresql+asyncpg://catalog:catalog_dev_password@db:5432/catalog"

    # Pagination
    default_page_limit: int = 10

    # Logging
    log_level: str = "INFO"

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
