# rostering/spot/models.py
from pydantic import Field
from typing import List

from ..entities.kinds import EntityKind
from ..entities.models import TenantScopedEntity
from ..entities.sqlite_entity_store import get_sqlite_entity_store
from ..entities.validator import EntityValidator
from ..skill.models import SKILL


class Spot(TenantScopedEntity):
    """A place or role where shifts happen."""
    name: str = Field(min_length=1, description="Unique within the tenant.")
    required_skill_set: List[int] = Field(
        default_factory=list,
        description="Ids of the skills an employee needs to work a shift at this spot."
    )


async def resolve_required_skills(tenant_id: int, spot: TenantScopedEntity) -> None:
    """
    Every required skill must exist and belong to the spot's tenant.

    Raises:
        EntityNotFoundError: A required skill id matches no Skill
        TenantMismatchError: A required skill belongs to another tenant
    """
    skill_store = await get_sqlite_entity_store(SKILL)
    skill_validator = EntityValidator(SKILL)
    for skill_id in spot.required_skill_set:
        skill = skill_validator.require_found(skill_id, await skill_store.find_by_id(skill_id))
        skill_validator.validate_owner(tenant_id, skill)


SPOT = EntityKind(
    name="Spot",
    path="spot",
    model=Spot,
    fields=("name", "required_skill_set"),
    resolve_references=resolve_required_skills
)
