# rostering/admin/endpoints.py
import logging
from fastapi import APIRouter, Depends, Response
from typing import Annotated

from .service import AdminResetService
from ..entities.sqlite_entity_store import get_sqlite_entity_store
from ..registry import ENTITY_KINDS
from ..tenants.sqlite_tenant_store import get_sqlite_tenant_store

logger = logging.getLogger(__name__)

admin_router = APIRouter(prefix="/admin", tags=["Admin"])


async def get_admin_reset_service() -> AdminResetService:
    """Factory function handing every entity store and the tenant store to the reset coordinator."""
    stores = [await get_sqlite_entity_store(kind) for kind in ENTITY_KINDS]
    stores.append(await get_sqlite_tenant_store())
    return AdminResetService(stores)


@admin_router.post("/reset", summary="Reset Application", description="Resets the application")
async def reset_application_endpoint(
    service: Annotated[AdminResetService, Depends(get_admin_reset_service)]
):
    """Takes no body and returns none."""
    logger.info("API: Received request to reset the application")
    await service.reset_application()
    return Response(status_code=200)
