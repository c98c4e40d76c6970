"""FastAPI dependency injection for shared resources."""

from functools import lru_cache
from pathlib import Path

from fastapi import HTTPException

from linearcal.config import Settings
from linearcal.models import CalendarConfig
from linearcal.settings import load_settings


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def get_data_path() -> Path:
    """Get the data directory path."""
    settings = get_settings()
    return Path(settings.data_path) if settings.data_path else Path("data")


def get_calendar_config() -> CalendarConfig:
    """Load calendar settings fresh for every request."""
    return load_settings(get_data_path())


def require_vault_path(settings: Settings) -> Path:
    """Return the configured vault path, or raise 503 if it is unusable."""
    if not settings.vault_path:
        raise HTTPException(
            status_code=503,
            detail="Vault path not configured. Set LINEARCAL_VAULT_PATH environment variable.",
        )
    vault_path = Path(settings.vault_path)
    if not vault_path.exists():
        raise HTTPException(status_code=503, detail=f"Vault path does not exist: {vault_path}")
    return vault_path
