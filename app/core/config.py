"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Rate limit applied to the customer endpoints.
        database_url: Explicit SQLAlchemy URL for the customer store.
        address_lookup_base_url: Base URL of the zip code API.
        address_lookup_timeout_seconds: Timeout for each zip code lookup.

    When database_url is not set, the URL is built from the postgres_*
    values so Docker Compose setups only need to override the host.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Customer Onboarding"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"

    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "customers"

    address_lookup_base_url: str = "https://viacep.com.br/ws"
    address_lookup_timeout_seconds: float = 5.0

    def get_database_url(self) -> str:
        """Return the effective SQLAlchemy URL for the customer store.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Built from postgres_* values
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
