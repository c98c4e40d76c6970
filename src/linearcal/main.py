"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.gzip import GZipMiddleware

from linearcal import __version__
from linearcal.api.calendar import router as calendar_router
from linearcal.api.vault import router as vault_router
from linearcal.calendar.periods import PeriodConfigurationError, validate_group
from linearcal.config import get_settings
from linearcal.models import CalendarConfig
from linearcal.settings import load_settings

logger = logging.getLogger(__name__)

settings = get_settings()
logging.getLogger("linearcal").setLevel(settings.log_level.upper())


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Log resolved configuration at startup for debugging."""
    s = get_settings()
    logger.info("Linear calendar starting, vault_path=%s, data_path=%s", s.vault_path, s.data_path)
    if not s.vault_path or not s.vault_path.exists():
        logger.error("VAULT PATH NOT CONFIGURED OR MISSING, calendar API will return 503")
    yield


app = FastAPI(
    title="Linear Calendar",
    description="Full-year linear calendar for dated Obsidian notes",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=500)

app.include_router(calendar_router)
app.include_router(vault_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Return project information."""
    return {
        "name": "Linear Calendar",
        "version": __version__,
        "description": "Full-year linear calendar for dated Obsidian notes",
    }


@app.get("/health")
@app.get("/api/v1/health")
async def health() -> dict[str, Any]:
    """Health check endpoint with vault and settings status."""
    s = get_settings()

    checks: dict[str, Any] = {"status": "ok"}

    if not s.vault_path or not s.vault_path.exists():
        checks["status"] = "error"
        checks["vault"] = "not configured or missing"
    else:
        checks["vault"] = "ok"

    settings_file = s.data_path / "settings.json"
    checks["settings_file"] = "present" if settings_file.exists() else "defaults"

    # Period groups that the grid would skip
    config = load_settings(s.data_path)
    invalid = _invalid_period_groups(config)
    if invalid:
        checks["invalid_period_groups"] = invalid
        if checks["status"] == "ok":
            checks["status"] = "warning"

    return checks


def _invalid_period_groups(config: CalendarConfig) -> list[str]:
    invalid: list[str] = []
    for group in config.custom_period_groups:
        try:
            validate_group(group)
        except PeriodConfigurationError:
            invalid.append(group.id)
    return invalid
