# rostering/skill/models.py
from pydantic import Field

from ..entities.kinds import EntityKind
from ..entities.models import TenantScopedEntity


class Skill(TenantScopedEntity):
    """A skill an employee may have and a spot may require."""
    name: str = Field(min_length=1, description="Unique within the tenant.")


SKILL = EntityKind(name="Skill", path="skill", model=Skill, fields=("name",))
