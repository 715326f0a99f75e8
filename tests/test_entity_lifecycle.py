# tests/test_entity_lifecycle.py
import asyncio

import pytest

from rostering.contract import CONTRACT, Contract
from rostering.entities.service import EntityLifecycleService
from rostering.entities.sqlite_entity_store import get_sqlite_entity_store
from rostering.errors import (
    DuplicateEntityError,
    EntityNotFoundError,
    TenantChangeForbiddenError,
    TenantMismatchError,
)
from rostering.skill import SKILL, Skill
from rostering.spot import SPOT, Spot

from .conftest import API_PREFIX, OTHER_TENANT_ID, TENANT_ID


async def test_round_trip_keeps_view_fields(skill_service):
    view = Skill(tenant_id=TENANT_ID, name="skill")

    created = await skill_service.create_entity(TENANT_ID, view)
    fetched = await skill_service.get_entity(TENANT_ID, created.id)

    assert created.id is not None
    assert fetched == created
    assert fetched.model_dump(exclude={"id"}) == view.model_dump(exclude={"id"})


async def test_create_ignores_incoming_id(skill_service):
    created = await skill_service.create_entity(TENANT_ID, Skill(id=999, tenant_id=TENANT_ID, name="skill"))

    assert created.id != 999
    with pytest.raises(EntityNotFoundError):
        await skill_service.get_entity(TENANT_ID, 999)


async def test_read_from_other_tenant_fails(skill_service):
    created = await skill_service.create_entity(TENANT_ID, Skill(tenant_id=TENANT_ID, name="skill"))

    with pytest.raises(TenantMismatchError) as exc_info:
        await skill_service.get_entity(OTHER_TENANT_ID, created.id)

    assert exc_info.value.tenant_id == OTHER_TENANT_ID
    assert exc_info.value.entity_tenant_id == TENANT_ID


async def test_scenario_create_read_update_delete(skill_service):
    skill = await skill_service.create_entity(TENANT_ID, Skill(tenant_id=TENANT_ID, name="skill"))

    assert (await skill_service.get_entity(TENANT_ID, skill.id)).name == "skill"

    updated = await skill_service.update_entity(
        TENANT_ID, Skill(id=skill.id, tenant_id=TENANT_ID, name="updatedSkill")
    )
    assert (updated.id, updated.tenant_id, updated.name) == (skill.id, TENANT_ID, "updatedSkill")

    with pytest.raises(TenantChangeForbiddenError) as exc_info:
        await skill_service.update_entity(
            OTHER_TENANT_ID, Skill(id=skill.id, tenant_id=OTHER_TENANT_ID, name="updatedSkill")
        )
    assert str(exc_info.value) == f"Skill entity with tenantId ({TENANT_ID}) cannot change tenants."

    assert await skill_service.delete_entity(TENANT_ID, skill.id) is True
    assert await skill_service.delete_entity(TENANT_ID, skill.id) is False


async def test_update_missing_id_is_not_found_even_with_wrong_tenant(skill_service):
    with pytest.raises(EntityNotFoundError) as exc_info:
        await skill_service.update_entity(
            TENANT_ID, Skill(id=12345, tenant_id=OTHER_TENANT_ID, name="skill")
        )

    assert str(exc_info.value) == "Skill entity with ID (12345) not found."


async def test_update_with_matching_owner_but_wrong_payload_tenant(skill_service):
    skill = await skill_service.create_entity(TENANT_ID, Skill(tenant_id=TENANT_ID, name="skill"))

    with pytest.raises(TenantMismatchError) as exc_info:
        await skill_service.update_entity(
            TENANT_ID, Skill(id=skill.id, tenant_id=OTHER_TENANT_ID, name="updatedSkill")
        )

    assert str(exc_info.value) == (
        f"The tenantId ({TENANT_ID}) does not match the persistable (updatedSkill)'s tenantId (0)."
    )
    assert (await skill_service.get_entity(TENANT_ID, skill.id)).name == "skill"


async def test_update_without_id_and_matching_tenant_is_not_found(skill_service):
    with pytest.raises(EntityNotFoundError) as exc_info:
        await skill_service.update_entity(TENANT_ID, Skill(tenant_id=TENANT_ID, name="skill"))

    assert str(exc_info.value) == "Skill entity with ID (None) not found."


async def test_update_may_keep_its_own_name_but_not_take_another(skill_service):
    first = await skill_service.create_entity(TENANT_ID, Skill(tenant_id=TENANT_ID, name="first"))
    await skill_service.create_entity(TENANT_ID, Skill(tenant_id=TENANT_ID, name="second"))

    kept = await skill_service.update_entity(TENANT_ID, Skill(id=first.id, tenant_id=TENANT_ID, name="first"))
    assert kept.name == "first"

    with pytest.raises(DuplicateEntityError):
        await skill_service.update_entity(TENANT_ID, Skill(id=first.id, tenant_id=TENANT_ID, name="second"))


async def test_same_name_allowed_in_different_tenants(skill_service):
    await skill_service.create_entity(TENANT_ID, Skill(tenant_id=TENANT_ID, name="skill"))
    other = await skill_service.create_entity(OTHER_TENANT_ID, Skill(tenant_id=OTHER_TENANT_ID, name="skill"))

    assert [s.id for s in await skill_service.list_entities(OTHER_TENANT_ID)] == [other.id]


async def test_ids_are_unique_across_kinds(skill_service):
    spot_service = EntityLifecycleService(SPOT, await get_sqlite_entity_store(SPOT))
    skill = await skill_service.create_entity(TENANT_ID, Skill(tenant_id=TENANT_ID, name="nurse"))
    spot = await spot_service.create_entity(
        TENANT_ID, Spot(tenant_id=TENANT_ID, name="ward", required_skill_set=[skill.id])
    )

    assert spot.id != skill.id
    with pytest.raises(EntityNotFoundError) as exc_info:
        await skill_service.get_entity(TENANT_ID, spot.id)
    assert str(exc_info.value) == f"No Skill entity found with ID ({spot.id})."


async def test_spot_update_replaces_required_skills(skill_service):
    service = EntityLifecycleService(SPOT, await get_sqlite_entity_store(SPOT))
    nurse, doctor, porter = [
        await skill_service.create_entity(TENANT_ID, Skill(tenant_id=TENANT_ID, name=name))
        for name in ("nurse", "doctor", "porter")
    ]
    spot = await service.create_entity(
        TENANT_ID, Spot(tenant_id=TENANT_ID, name="ward", required_skill_set=[nurse.id, doctor.id])
    )

    updated = await service.update_entity(
        TENANT_ID, Spot(id=spot.id, tenant_id=TENANT_ID, name="ward", required_skill_set=[porter.id])
    )

    assert updated.required_skill_set == [porter.id]
    assert (await service.get_entity(TENANT_ID, spot.id)).required_skill_set == [porter.id]


async def test_spot_requiring_unknown_skill_is_not_created(skill_service):
    service = EntityLifecycleService(SPOT, await get_sqlite_entity_store(SPOT))
    nurse = await skill_service.create_entity(TENANT_ID, Skill(tenant_id=TENANT_ID, name="nurse"))

    with pytest.raises(EntityNotFoundError) as exc_info:
        await service.create_entity(
            TENANT_ID, Spot(tenant_id=TENANT_ID, name="ward", required_skill_set=[nurse.id, 987654])
        )

    assert str(exc_info.value) == "No Skill entity found with ID (987654)."
    assert await service.list_entities(TENANT_ID) == []


async def test_spot_requiring_other_tenants_skill_is_not_created(skill_service):
    service = EntityLifecycleService(SPOT, await get_sqlite_entity_store(SPOT))
    foreign = await skill_service.create_entity(OTHER_TENANT_ID, Skill(tenant_id=OTHER_TENANT_ID, name="nurse"))

    with pytest.raises(TenantMismatchError) as exc_info:
        await service.create_entity(
            TENANT_ID, Spot(tenant_id=TENANT_ID, name="ward", required_skill_set=[foreign.id])
        )

    assert exc_info.value.tenant_id == TENANT_ID
    assert exc_info.value.entity_tenant_id == OTHER_TENANT_ID
    assert await service.list_entities(TENANT_ID) == []


async def test_spot_update_to_other_tenants_skill_keeps_stored_spot(skill_service):
    service = EntityLifecycleService(SPOT, await get_sqlite_entity_store(SPOT))
    nurse = await skill_service.create_entity(TENANT_ID, Skill(tenant_id=TENANT_ID, name="nurse"))
    foreign = await skill_service.create_entity(OTHER_TENANT_ID, Skill(tenant_id=OTHER_TENANT_ID, name="nurse"))
    spot = await service.create_entity(
        TENANT_ID, Spot(tenant_id=TENANT_ID, name="ward", required_skill_set=[nurse.id])
    )

    with pytest.raises(TenantMismatchError):
        await service.update_entity(
            TENANT_ID, Spot(id=spot.id, tenant_id=TENANT_ID, name="ward", required_skill_set=[foreign.id])
        )

    assert (await service.get_entity(TENANT_ID, spot.id)).required_skill_set == [nurse.id]


async def test_spot_with_unknown_skill_over_http_is_404(client):
    response = await client.post(
        f"{API_PREFIX}/tenant/{TENANT_ID}/spot/add",
        json={"tenantId": TENANT_ID, "name": "ward", "requiredSkillSet": [987654]}
    )

    assert response.status_code == 404
    assert response.json() == {
        "exceptionMessage": "No Skill entity found with ID (987654).",
        "exceptionClass": "EntityNotFound",
    }


async def test_id_beyond_integer_range_is_not_found(skill_service):
    too_large = 2**63

    with pytest.raises(EntityNotFoundError) as exc_info:
        await skill_service.get_entity(TENANT_ID, too_large)

    assert str(exc_info.value) == f"No Skill entity found with ID ({too_large})."
    assert await skill_service.delete_entity(TENANT_ID, too_large) is False
    assert await skill_service.list_entities(too_large) == []
    with pytest.raises(EntityNotFoundError):
        await skill_service.update_entity(TENANT_ID, Skill(id=too_large, tenant_id=TENANT_ID, name="skill"))


async def test_id_beyond_integer_range_over_http(client):
    too_large = 2**63

    get_response = await client.get(f"{API_PREFIX}/tenant/{TENANT_ID}/skill/{too_large}")
    delete_response = await client.delete(f"{API_PREFIX}/tenant/{TENANT_ID}/skill/{too_large}")
    tenant_response = await client.get(f"{API_PREFIX}/tenant/{too_large}")

    assert get_response.status_code == 404
    assert get_response.json()["exceptionClass"] == "EntityNotFound"
    assert delete_response.status_code == 200
    assert delete_response.json() is False
    assert tenant_response.status_code == 404
    assert tenant_response.json()["exceptionClass"] == "EntityNotFound"


async def test_contract_limits_round_trip(db):
    service = EntityLifecycleService(CONTRACT, await get_sqlite_entity_store(CONTRACT))
    contract = await service.create_entity(
        TENANT_ID, Contract(tenant_id=TENANT_ID, name="part time", maximum_minutes_per_week=1200)
    )

    fetched = await service.get_entity(TENANT_ID, contract.id)

    assert fetched.maximum_minutes_per_week == 1200
    assert fetched.maximum_minutes_per_day is None


async def test_concurrent_updates_are_serialized(skill_service):
    skill = await skill_service.create_entity(TENANT_ID, Skill(tenant_id=TENANT_ID, name="skill"))
    names = [f"name-{i}" for i in range(10)]

    results = await asyncio.gather(*(
        skill_service.update_entity(TENANT_ID, Skill(id=skill.id, tenant_id=TENANT_ID, name=name))
        for name in names
    ))

    assert [r.name for r in results] == names
    assert (await skill_service.get_entity(TENANT_ID, skill.id)).name in names


async def test_concurrent_creates_get_distinct_ids(skill_service):
    created = await asyncio.gather(*(
        skill_service.create_entity(TENANT_ID, Skill(tenant_id=TENANT_ID, name=f"skill-{i}"))
        for i in range(10)
    ))

    assert len({s.id for s in created}) == 10
    assert len(await skill_service.list_entities(TENANT_ID)) == 10
