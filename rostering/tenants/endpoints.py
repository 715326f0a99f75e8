# rostering/tenants/endpoints.py
import logging
from fastapi import APIRouter, Depends, Path
from typing import List, Annotated

from .models import Tenant, TenantCreate
from .service import TenantService
from .sqlite_tenant_store import get_sqlite_tenant_store
from ..entities.sqlite_entity_store import get_sqlite_entity_store
from ..registry import ENTITY_KINDS

logger = logging.getLogger(__name__)

tenants_router = APIRouter(prefix="/tenant", tags=["Tenant"])


async def get_tenant_service() -> TenantService:
    """Factory function to create TenantService with the tenant store and every entity store."""
    tenant_store = await get_sqlite_tenant_store()
    entity_stores = [await get_sqlite_entity_store(kind) for kind in ENTITY_KINDS]
    return TenantService(tenant_store, entity_stores)


@tenants_router.get("/", response_model=List[Tenant])
@tenants_router.get("", response_model=List[Tenant], include_in_schema=False)
async def list_tenants_endpoint(
    service: Annotated[TenantService, Depends(get_tenant_service)]
):
    """List all tenants. Handles both trailing slash variants."""
    return await service.list_tenants()


@tenants_router.get("/{tenant_id}", response_model=Tenant)
async def get_tenant_endpoint(
    tenant_id: Annotated[int, Path(description="The ID of the tenant to retrieve")],
    service: Annotated[TenantService, Depends(get_tenant_service)]
):
    """Retrieve a specific tenant by id."""
    return await service.get_tenant(tenant_id)


@tenants_router.post("/add", response_model=Tenant)
async def create_tenant_endpoint(
    tenant_create: TenantCreate,
    service: Annotated[TenantService, Depends(get_tenant_service)]
):
    """Create a new tenant."""
    logger.info(f"API: Received request to create tenant: {tenant_create.model_dump()}")
    return await service.create_tenant(tenant_create)


@tenants_router.post("/remove/{tenant_id}", response_model=bool)
async def delete_tenant_endpoint(
    tenant_id: Annotated[int, Path(description="The ID of the tenant to delete")],
    service: Annotated[TenantService, Depends(get_tenant_service)]
):
    """Delete a tenant and everything it owns. Returns false if the tenant does not exist."""
    return await service.delete_tenant(tenant_id)
