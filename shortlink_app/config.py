from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = True

    # Application
    app_name: str = "Shortlink Edge"
    app_version: str = "1.0.0"

    # Database
    # PLANETSCALE_DATABASE_URL wins over DATABASE_URL. Leaving both unset
    # disables every edge query (they all return None).
    database_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("planetscale_database_url", "database_url"),
    )
    database_echo: bool = False

    # Identifiers
    workspace_id_prefix: str = "ws_"
    root_key: str = "_root"  # Key used for a domain's own destination

    # Random key generation
    short_key_length: int = 7
    long_key_length: int = 69
    max_key_attempts: int = 10  # Per key length, before widening / giving up

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
