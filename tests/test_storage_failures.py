# tests/test_storage_failures.py
import sqlite3

import pytest

from rostering.entities.service import EntityLifecycleService
from rostering.entities.sqlite_entity_store import get_sqlite_entity_store
from rostering.errors import StorageFailureError
from rostering.skill import SKILL, Skill
from rostering.storage import sqlite_base
from rostering.storage.sqlite_base import sqlite_transaction

from .conftest import API_PREFIX, TENANT_ID


class FailingConnection:
    """Wraps the shared connection; any statement containing ``failing_sql`` raises."""

    def __init__(self, conn: sqlite3.Connection, failing_sql: str):
        self._conn = conn
        self.failing_sql = failing_sql

    def execute(self, query, params=()):
        if self.failing_sql in query:
            raise sqlite3.OperationalError("disk I/O error")
        return self._conn.execute(query, params)

    def __getattr__(self, name):
        return getattr(self._conn, name)


class ConnectionFaults:
    def __init__(self):
        self.real_connection = sqlite_base._db_connection

    def fail(self, failing_sql: str) -> None:
        sqlite_base._db_connection = FailingConnection(self.real_connection, failing_sql)

    def heal(self) -> None:
        sqlite_base._db_connection = self.real_connection


@pytest.fixture
def faults(db):
    connection_faults = ConnectionFaults()
    yield connection_faults
    connection_faults.heal()


async def test_failed_insert_is_storage_failure(skill_service, faults):
    faults.fail("INSERT INTO rostering_entities")

    with pytest.raises(StorageFailureError) as exc_info:
        await skill_service.create_entity(TENANT_ID, Skill(tenant_id=TENANT_ID, name="skill"))

    assert str(exc_info.value) == "Storage failure for Skill entities: disk I/O error"
    assert exc_info.value.to_body()["exceptionClass"] == "StorageFailure"
    faults.heal()
    assert await skill_service.list_entities(TENANT_ID) == []


async def test_failed_update_over_http_is_500_and_rolled_back(client, faults):
    created = await client.post(
        f"{API_PREFIX}/tenant/{TENANT_ID}/skill/add", json={"tenantId": TENANT_ID, "name": "skill"}
    )
    skill_id = created.json()["id"]
    faults.fail("UPDATE rostering_entities")

    response = await client.post(
        f"{API_PREFIX}/tenant/{TENANT_ID}/skill/update",
        json={"id": skill_id, "tenantId": TENANT_ID, "name": "updatedSkill"}
    )

    assert response.status_code == 500
    assert response.json() == {
        "exceptionMessage": "Storage failure for Skill entities: disk I/O error",
        "exceptionClass": "StorageFailure",
    }
    faults.heal()
    stored = await client.get(f"{API_PREFIX}/tenant/{TENANT_ID}/skill/{skill_id}")
    assert stored.json()["name"] == "skill"


async def test_failed_tenant_removal_keeps_its_entities(client, faults):
    tenant = (await client.post(f"{API_PREFIX}/tenant/add", json={"name": "Hospital"})).json()
    service = EntityLifecycleService(SKILL, await get_sqlite_entity_store(SKILL))
    skill = await service.create_entity(tenant["id"], Skill(tenant_id=tenant["id"], name="nurse"))
    faults.fail("DELETE FROM rostering_tenants")

    response = await client.post(f"{API_PREFIX}/tenant/remove/{tenant['id']}")

    assert response.status_code == 500
    assert response.json()["exceptionClass"] == "StorageFailure"
    faults.heal()
    assert await service.list_entities(tenant["id"]) == [skill]
    assert (await client.get(f"{API_PREFIX}/tenant/")).json() == [tenant]


async def test_failed_begin_is_storage_failure(skill_service, faults):
    faults.fail("BEGIN IMMEDIATE")

    with pytest.raises(StorageFailureError, match="Could not begin transaction: disk I/O error"):
        await skill_service.list_entities(TENANT_ID)


async def test_transaction_without_lock_is_storage_failure(db, monkeypatch):
    monkeypatch.setattr(sqlite_base, "_db_lock", None)

    with pytest.raises(StorageFailureError, match="not initialized"):
        async with sqlite_transaction():
            pass
