# tests/test_tenants.py
from rostering.entities.service import EntityLifecycleService
from rostering.entities.sqlite_entity_store import get_sqlite_entity_store
from rostering.skill import SKILL, Skill

from .conftest import API_PREFIX


async def test_create_and_get_tenant(client):
    created = await client.post(f"{API_PREFIX}/tenant/add", json={"name": "Hospital"})

    assert created.status_code == 200
    tenant = created.json()
    assert tenant["name"] == "Hospital"

    fetched = await client.get(f"{API_PREFIX}/tenant/{tenant['id']}")
    assert fetched.json() == tenant
    assert (await client.get(f"{API_PREFIX}/tenant")).json() == [tenant]


async def test_get_non_existent_tenant(client):
    response = await client.get(f"{API_PREFIX}/tenant/42")

    assert response.status_code == 404
    assert response.json() == {
        "exceptionMessage": "No Tenant entity found with ID (42).",
        "exceptionClass": "EntityNotFound",
    }


async def test_duplicate_tenant_name(client):
    await client.post(f"{API_PREFIX}/tenant/add", json={"name": "Hospital"})

    response = await client.post(f"{API_PREFIX}/tenant/add", json={"name": "Hospital"})

    assert response.status_code == 500
    assert response.json()["exceptionClass"] == "DuplicateEntity"


async def test_remove_tenant_removes_its_entities_only(client):
    tenant = (await client.post(f"{API_PREFIX}/tenant/add", json={"name": "Hospital"})).json()
    other = (await client.post(f"{API_PREFIX}/tenant/add", json={"name": "Clinic"})).json()
    service = EntityLifecycleService(SKILL, await get_sqlite_entity_store(SKILL))
    await service.create_entity(tenant["id"], Skill(tenant_id=tenant["id"], name="nurse"))
    kept = await service.create_entity(other["id"], Skill(tenant_id=other["id"], name="nurse"))

    removed = await client.post(f"{API_PREFIX}/tenant/remove/{tenant['id']}")

    assert removed.status_code == 200
    assert removed.json() is True
    assert await service.list_entities(tenant["id"]) == []
    assert await service.list_entities(other["id"]) == [kept]
    assert (await client.get(f"{API_PREFIX}/tenant/")).json() == [other]


async def test_remove_non_existent_tenant(client):
    response = await client.post(f"{API_PREFIX}/tenant/remove/42")

    assert response.status_code == 200
    assert response.json() is False
