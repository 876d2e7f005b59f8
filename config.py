"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (or a .env file) with
development defaults.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Post Portal settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Server settings
    host: str = "0.0.0.0"
    port: int = 5000
    node_env: str = "development"

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173"]

    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    database_name: str = "post-portal"

    # Session token
    jwt_secret: str = "change-me"  # Change this in production!
    access_token_expire_minutes: int = 60

    # Payment provider
    stripe_secret_key: str = ""

    @property
    def production(self) -> bool:
        return self.node_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
