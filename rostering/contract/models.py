# rostering/contract/models.py
from pydantic import Field
from typing import Optional

from ..entities.kinds import EntityKind
from ..entities.models import TenantScopedEntity


class Contract(TenantScopedEntity):
    """Working-time limits shared by the employees on the contract. Unset limits are unbounded."""
    name: str = Field(min_length=1, description="Unique within the tenant.")
    maximum_minutes_per_day: Optional[int] = Field(default=None, ge=0)
    maximum_minutes_per_week: Optional[int] = Field(default=None, ge=0)
    maximum_minutes_per_month: Optional[int] = Field(default=None, ge=0)
    maximum_minutes_per_year: Optional[int] = Field(default=None, ge=0)


CONTRACT = EntityKind(
    name="Contract",
    path="contract",
    model=Contract,
    fields=(
        "name",
        "maximum_minutes_per_day",
        "maximum_minutes_per_week",
        "maximum_minutes_per_month",
        "maximum_minutes_per_year",
    )
)
