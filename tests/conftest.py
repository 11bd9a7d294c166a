"""Shared pytest fixtures for the spicerack test suite."""

from __future__ import annotations

from typing import Generator, List

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from spicerack.config import get_settings
from spicerack.db.repository import reset_repository_state
from spicerack.models.spice import Spice
from spicerack.server.app import create_app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Give each test its own SQLite database and editable catalog location."""

    db_path = tmp_path / "test_spicerack.db"
    monkeypatch.setenv("SPICERACK_DATABASE_PATH", str(db_path))
    monkeypatch.delenv("SPICERACK_CATALOG_PATH", raising=False)
    monkeypatch.delenv("SPICERACK_API_TOKEN", raising=False)
    get_settings.cache_clear()
    reset_repository_state()
    yield
    reset_repository_state()
    get_settings.cache_clear()


@pytest.fixture()
def app() -> Generator[FastAPI, None, None]:
    """Create a new FastAPI app instance for each test and reset overrides."""

    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app) -> TestClient:
    """Return a test client bound to the FastAPI app."""

    return TestClient(app)


@pytest.fixture()
def sample_spices() -> List[Spice]:
    return [
        Spice(name="Cinnamon", category="C"),
        Spice(name="Paprika", category="P"),
        Spice(name="Basil", category="B"),
        Spice(name="Thyme", category="T"),
        Spice(name="Oregano", category="O"),
    ]
