# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up required environment variables before any imports
# - Gives every test its own SQLite file under tmp_path
# - Provides a migrated engine, a PersonService and a running app client
# =============================================================================

import os
from pathlib import Path

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# get_settings() reads these when create_app() is called without settings

MIGRATIONS_DIR = Path(__file__).resolve().parent.parent / "migrations"

os.environ.setdefault("SQLITE_DSN", "./testfiles/sqlite/person.db")
os.environ.setdefault("SQLITE_MIGRATIONS_DIR", str(MIGRATIONS_DIR))
os.environ.setdefault("HTTP_SERVER_PORT", "8080")
os.environ.setdefault("ENVIRONMENT", "development")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from core.database import create_engine
from core.migrations import run_migrations
from core.services import PersonService


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a fresh database file for this test."""
    return Settings(
        SQLITE_DSN=str(tmp_path / "sqlite" / "person.db"),
        SQLITE_MIGRATIONS_DIR=MIGRATIONS_DIR,
        HTTP_SERVER_PORT=8080,
    )


@pytest_asyncio.fixture
async def engine(settings):
    """Migrated async engine, disposed after the test."""
    engine = create_engine(settings)
    await run_migrations(engine, settings.SQLITE_MIGRATIONS_DIR)
    yield engine
    await engine.dispose()


@pytest.fixture
def person_service(engine) -> PersonService:
    """PersonService bound to the migrated test database."""
    return PersonService(engine)


@pytest.fixture
def client(settings):
    """TestClient with the app lifespan (migrations, bundle) running."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def new_person_payload() -> dict:
    """Valid create request body."""
    return {
        "first_name": "unit",
        "last_name": "test",
        "email": "testing@mailbox.com",
    }
