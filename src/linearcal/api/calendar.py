"""Linear calendar API endpoints."""

import asyncio
import logging
from datetime import date
from pathlib import Path as FilePath
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from linearcal.api.dependencies import get_calendar_config, get_settings, require_vault_path
from linearcal.calendar.grid import assemble
from linearcal.calendar.periods import QUARTERS, PeriodConfigurationError, resolve
from linearcal.config import Settings
from linearcal.models import CalendarConfig, CustomPeriodGroup, GridModel, PeriodNoteResponse
from linearcal.vault.connector import VaultConnector

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/calendar", tags=["calendar"])

Year = Annotated[int, Path(ge=1, le=9998, description="Calendar year")]


def _build_grid(vault_path: FilePath, config: CalendarConfig, year: int) -> GridModel:
    documents = VaultConnector(vault_path).read_all_documents()
    grid = assemble(documents, config, year, today=date.today())
    logger.info(
        "Built %d calendar from %d documents (%d warnings)",
        year,
        len(documents),
        len(grid.warnings),
    )
    return grid


@router.get("/{year}", response_model=GridModel)
async def get_calendar(
    year: Year,
    settings: Annotated[Settings, Depends(get_settings)],
    config: Annotated[CalendarConfig, Depends(get_calendar_config)],
) -> GridModel:
    """Build the linear calendar grid for a year."""
    vault_path = require_vault_path(settings)
    # Reading the vault is blocking I/O, run in thread
    return await asyncio.to_thread(_build_grid, vault_path, config, year)


def _find_group(config: CalendarConfig, group_id: str) -> CustomPeriodGroup | None:
    if group_id == QUARTERS.id:
        return QUARTERS
    return next((g for g in config.custom_period_groups if g.id == group_id), None)


@router.get("/{year}/period-note", response_model=PeriodNoteResponse)
async def get_period_note(
    year: Year,
    config: Annotated[CalendarConfig, Depends(get_calendar_config)],
    group_id: str = Query(description="Period group id"),
    month: int = Query(ge=0, le=11, description="Month clicked, 0-11"),
) -> PeriodNoteResponse:
    """Return which period note a click on a header cell opens."""
    group = _find_group(config, group_id)
    if group is None:
        raise HTTPException(status_code=404, detail=f"Unknown period group: {group_id}")

    try:
        span = resolve(group, year, month)
    except PeriodConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    if span is None:
        raise HTTPException(
            status_code=404, detail=f"No period in {group.name} covers month {month}"
        )

    return PeriodNoteResponse(
        group_id=group.id,
        period_id=span.period.id,
        period_name=span.period.name,
        note_year=span.note_year,
    )
