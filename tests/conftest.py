# tests/conftest.py
import logging

import httpx
import pytest

from rostering.entities.service import EntityLifecycleService
from rostering.entities.sqlite_entity_store import get_sqlite_entity_store
from rostering.settings import settings
from rostering.skill import SKILL
from rostering.storage.sqlite_base import close_sqlite_db_connection, get_sqlite_db_connection

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - [%(levelname)s] - %(message)s",
)

TENANT_ID = 1
OTHER_TENANT_ID = 0
API_PREFIX = settings.api_prefix


@pytest.fixture
async def db(tmp_path, monkeypatch):
    """A fresh SQLite database file per test."""
    monkeypatch.setattr(settings, "sqlite_db_path", str(tmp_path / "rostering_test.sqlite3"))
    await close_sqlite_db_connection()
    await get_sqlite_db_connection()
    yield
    await close_sqlite_db_connection()


@pytest.fixture
async def client(db):
    from rostering.main import app

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client


@pytest.fixture
async def skill_service(db) -> EntityLifecycleService:
    return EntityLifecycleService(SKILL, await get_sqlite_entity_store(SKILL))
