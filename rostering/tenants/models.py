# rostering/tenants/models.py
from pydantic import BaseModel, ConfigDict, Field


class TenantBase(BaseModel):
    """Base model containing common tenant fields shared across operations."""
    name: str = Field(min_length=1, description="Unique display name of the tenant.")


class TenantCreate(TenantBase):
    """Model for tenant creation requests; the id is assigned by the store."""
    pass


class Tenant(TenantBase):
    """Model for tenant data as stored and returned by the API."""
    id: int

    model_config = ConfigDict(from_attributes=True)
