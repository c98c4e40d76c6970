"""Shared test fixtures."""

from contextlib import contextmanager

import pytest
from fastapi.testclient import TestClient

from linearcal.api.dependencies import get_settings
from linearcal.main import app
from linearcal.models import Document


@pytest.fixture
def client():
    return TestClient(app)


@contextmanager
def override_paths(vault_path, data_path=None):
    """Temporarily override the cached settings paths, restoring them on exit."""
    settings = get_settings()
    original = (settings.vault_path, settings.data_path)
    settings.vault_path = vault_path
    if data_path is not None:
        settings.data_path = data_path
    try:
        yield settings
    finally:
        settings.vault_path, settings.data_path = original


def make_doc(name: str, folder: str = "", **properties: object) -> Document:
    """Build a document as the vault parser would."""
    path = f"{folder}/{name}.md" if folder else f"{name}.md"
    return Document(path=path, name=name, folder=folder, properties=properties)
