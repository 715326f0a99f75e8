# rostering/tenants/service.py
import logging
from typing import List, Sequence

from .models import Tenant, TenantCreate
from .storage_interfaces import AbstractTenantStore
from ..entities.service import TransactionFactory
from ..entities.storage_interfaces import AbstractEntityStore
from ..errors import DuplicateEntityError, EntityNotFoundError
from ..storage.sqlite_base import sqlite_transaction

logger = logging.getLogger(__name__)


class TenantService:
    """
    Service layer for tenant management operations.

    Removing a tenant also removes everything it owns, so the service holds
    the stores of every registered entity kind alongside the tenant store.
    """

    def __init__(
        self,
        tenant_store: AbstractTenantStore,
        entity_stores: Sequence[AbstractEntityStore],
        transaction: TransactionFactory = sqlite_transaction
    ):
        self.tenant_store = tenant_store
        self.entity_stores = list(entity_stores)
        self.transaction = transaction

    async def create_tenant(self, tenant_create: TenantCreate) -> Tenant:
        """
        Register a new tenant.

        Raises:
            DuplicateEntityError: A tenant with the same name already exists
        """
        logger.info(f"Service: Attempting to create tenant '{tenant_create.name}'")
        async with self.transaction():
            if await self.tenant_store.get_tenant_by_name(tenant_create.name):
                logger.warning(f"Service: Tenant creation failed, name '{tenant_create.name}' is taken")
                raise DuplicateEntityError(
                    f"Tenant entity with name ({tenant_create.name}) already exists."
                )
            tenant = await self.tenant_store.create_tenant(tenant_create)
        logger.info(f"Service: Created tenant {tenant.id} '{tenant.name}'")
        return tenant

    async def get_tenant(self, tenant_id: int) -> Tenant:
        """Retrieve a tenant; raises EntityNotFoundError if it does not exist."""
        logger.info(f"Service: Getting tenant {tenant_id}")
        async with self.transaction():
            tenant = await self.tenant_store.get_tenant(tenant_id)
        if tenant is None:
            raise EntityNotFoundError(f"No Tenant entity found with ID ({tenant_id}).")
        return tenant

    async def list_tenants(self) -> List[Tenant]:
        logger.info("Service: Listing tenants")
        async with self.transaction():
            return await self.tenant_store.list_tenants()

    async def delete_tenant(self, tenant_id: int) -> bool:
        """
        Remove a tenant together with every tenant-scoped entity it owns.

        Returns False, without error, when the tenant does not exist.
        """
        logger.info(f"Service: Deleting tenant {tenant_id}")
        async with self.transaction():
            if await self.tenant_store.get_tenant(tenant_id) is None:
                logger.info(f"Service: Tenant {tenant_id} does not exist; nothing to delete")
                return False
            for store in self.entity_stores:
                removed = await store.delete_by_tenant(tenant_id)
                logger.debug(f"Service: Removed {removed} {store.kind.name} entities of tenant {tenant_id}")
            return await self.tenant_store.delete_tenant(tenant_id)
