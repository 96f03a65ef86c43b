"""Shared fixtures: an isolated SQLite database and public dir per test."""

from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from forum.main import create_app
from forum.services.uploads import ensure_upload_dir
from forum.settings import get_settings
from forum.stores.database import close_db, create_tables, init_db


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point the app at a throwaway database and public directory."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'forum.db'}")
    monkeypatch.setenv("PUBLIC_DIR", str(tmp_path / "public"))
    monkeypatch.setenv("MAX_UPLOAD_BYTES", "1024")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
async def db(settings):
    """Initialized database, tables and upload dir, as the app lifespan does at startup."""
    ensure_upload_dir(settings)
    await init_db()
    await create_tables()
    yield
    await close_db()


@pytest.fixture
async def client(db):
    """Create test client.

    ASGITransport does not run the lifespan, so the db fixture does the startup work.
    """
    async with AsyncClient(
        transport=ASGITransport(app=create_app()),
        base_url="http://test",
    ) as ac:
        yield ac
