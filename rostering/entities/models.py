# rostering/entities/models.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional


class TenantScopedEntity(BaseModel):
    """
    Base model shared by every tenant-scoped entity kind.

    The same model is used as the request view and as the response body. On the
    wire the fields are camelCase (``tenantId``); snake_case input is accepted too.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )

    id: Optional[int] = Field(
        default=None,
        description="Assigned by the store on creation; absent on create requests."
    )
    tenant_id: int = Field(
        ge=-2**63,
        le=2**63 - 1,
        description="The owning tenant. Never changes after creation."
    )

    def label(self) -> str:
        """Display name of the entity, as rendered in validation messages."""
        name = getattr(self, "name", None)
        return str(name) if name is not None else str(self.id)
