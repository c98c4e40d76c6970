"""Vault lookup endpoints: property names, property values and tags."""

import asyncio
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends

from linearcal.api.dependencies import get_settings, require_vault_path
from linearcal.config import Settings
from linearcal.models import Document
from linearcal.vault.catalog import property_names, property_values, tag_names
from linearcal.vault.connector import VaultConnector

router = APIRouter(prefix="/api/v1/vault", tags=["vault"])


def _read_documents(vault_path: Path) -> list[Document]:
    return VaultConnector(vault_path).read_all_documents()


@router.get("/properties", response_model=list[str])
async def list_properties(
    settings: Annotated[Settings, Depends(get_settings)],
) -> list[str]:
    """Frontmatter keys in use, for choosing date and filter properties."""
    documents = await asyncio.to_thread(_read_documents, require_vault_path(settings))
    return property_names(documents)


@router.get("/properties/{key}/values", response_model=list[str])
async def list_property_values(
    key: str,
    settings: Annotated[Settings, Depends(get_settings)],
) -> list[str]:
    documents = await asyncio.to_thread(_read_documents, require_vault_path(settings))
    return property_values(documents, key)


@router.get("/tags", response_model=list[str])
async def list_tags(
    settings: Annotated[Settings, Depends(get_settings)],
) -> list[str]:
    documents = await asyncio.to_thread(_read_documents, require_vault_path(settings))
    return tag_names(documents)
