"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LINEARCAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server settings
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Browser origins allowed to call the API (JSON list in the env var)
    cors_origins: list[str] = Field(default_factory=list)

    # Vault settings
    vault_path: Path | None = None

    # Data storage (holds settings.json)
    data_path: Path = Path("data")

    # Log level for the linearcal package
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
