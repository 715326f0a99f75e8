# tests/test_app.py
from rostering.entities.sqlite_entity_store import SQLiteEntityStore
from rostering.storage import sqlite_base
from rostering.tenants.sqlite_tenant_store import SQLiteTenantStore


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_lifespan_tears_down_stores_then_closes_connection(db, monkeypatch):
    from rostering.main import app, rostering_app_lifespan

    torn_down = []

    async def record_entity_teardown(self):
        torn_down.append(self.kind.path)

    async def record_tenant_teardown(self):
        torn_down.append("tenant")

    monkeypatch.setattr(SQLiteEntityStore, "teardown", record_entity_teardown)
    monkeypatch.setattr(SQLiteTenantStore, "teardown", record_tenant_teardown)

    async with rostering_app_lifespan(app):
        assert sqlite_base._db_connection is not None
        assert torn_down == []

    assert torn_down == ["tenant", "contract", "spot", "skill"]
    assert sqlite_base._db_connection is None
