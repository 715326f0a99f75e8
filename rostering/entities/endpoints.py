# rostering/entities/endpoints.py
import logging
from fastapi import APIRouter, Depends, Path
from typing import List, Annotated

from .kinds import EntityKind
from .service import EntityLifecycleService
from .sqlite_entity_store import get_sqlite_entity_store

logger = logging.getLogger(__name__)


def build_entity_router(kind: EntityKind) -> APIRouter:
    """
    Build the tenant-scoped CRUD router for one entity kind.

    Domain failures are not caught here; they propagate to the application's
    exception handlers, which render the status code and error body.
    """
    model = kind.model

    router = APIRouter(
        prefix=f"/tenant/{{tenant_id}}/{kind.path}",
        tags=[kind.name]
    )

    async def get_entity_service() -> EntityLifecycleService:
        """Factory function to create the kind's service with its injected store."""
        store = await get_sqlite_entity_store(kind)
        return EntityLifecycleService(kind, store)

    TenantId = Annotated[int, Path(description="The tenant the call is scoped to.")]
    Service = Annotated[EntityLifecycleService, Depends(get_entity_service)]

    @router.get("/", response_model=List[model], summary=f"List {kind.name} entities of a tenant")
    @router.get("", response_model=List[model], include_in_schema=False)
    async def list_entities(tenant_id: TenantId, service: Service):
        """Handles both trailing slash variants."""
        return await service.list_entities(tenant_id)

    @router.get("/{entity_id}", response_model=model, summary=f"Get a {kind.name} entity by id")
    async def get_entity(
        tenant_id: TenantId,
        entity_id: Annotated[int, Path(description=f"The id of the {kind.name} entity.")],
        service: Service
    ):
        return await service.get_entity(tenant_id, entity_id)

    @router.post("/add", response_model=model, summary=f"Add a {kind.name} entity")
    async def create_entity(tenant_id: TenantId, view: model, service: Service):  # type: ignore[valid-type]
        logger.info(f"API: Received request to create {kind.name} for tenant {tenant_id}")
        return await service.create_entity(tenant_id, view)

    @router.post("/update", response_model=model, summary=f"Update a {kind.name} entity")
    async def update_entity(tenant_id: TenantId, view: model, service: Service):  # type: ignore[valid-type]
        logger.info(f"API: Received request to update {kind.name} {view.id} for tenant {tenant_id}")
        return await service.update_entity(tenant_id, view)

    @router.delete("/{entity_id}", response_model=bool, summary=f"Delete a {kind.name} entity")
    async def delete_entity(
        tenant_id: TenantId,
        entity_id: Annotated[int, Path(description=f"The id of the {kind.name} entity.")],
        service: Service
    ):
        """Returns false, not 404, when the entity does not exist."""
        return await service.delete_entity(tenant_id, entity_id)

    return router
