# rostering/entities/service.py
import logging
from typing import AsyncContextManager, Callable, List

from .kinds import EntityKind
from .models import TenantScopedEntity
from .storage_interfaces import AbstractEntityStore
from .validator import EntityValidator
from ..storage.sqlite_base import sqlite_transaction

logger = logging.getLogger(__name__)

TransactionFactory = Callable[[], AsyncContextManager]


class EntityLifecycleService:
    """
    Service layer implementing the tenant-scoped CRUD contract for one entity kind.

    Each operation runs inside a single transaction and follows a fixed
    validate-then-effect sequence. Existence is always checked before ownership,
    so a tenant check never masks a missing id.
    """

    def __init__(
        self,
        kind: EntityKind,
        store: AbstractEntityStore,
        transaction: TransactionFactory = sqlite_transaction
    ):
        self.kind = kind
        self.store = store
        self.validator = EntityValidator(kind)
        self.transaction = transaction

    async def _resolve_references(self, tenant_id: int, candidate: TenantScopedEntity) -> None:
        if self.kind.resolve_references is not None:
            await self.kind.resolve_references(tenant_id, candidate)

    async def list_entities(self, tenant_id: int) -> List[TenantScopedEntity]:
        """Every entity of this kind owned by the tenant."""
        logger.info(f"Service: Listing {self.kind.name} entities for tenant {tenant_id}")
        async with self.transaction():
            return await self.store.list_by_tenant(tenant_id)

    async def get_entity(self, tenant_id: int, entity_id: int) -> TenantScopedEntity:
        """
        Read one entity.

        Raises:
            EntityNotFoundError: No entity of this kind has the id
            TenantMismatchError: The entity belongs to another tenant
        """
        logger.info(f"Service: Getting {self.kind.name} {entity_id} for tenant {tenant_id}")
        async with self.transaction():
            found = self.validator.require_found(entity_id, await self.store.find_by_id(entity_id))
            self.validator.validate_owner(tenant_id, found)
            return found

    async def create_entity(self, tenant_id: int, view: TenantScopedEntity) -> TenantScopedEntity:
        """
        Persist a new entity from its view. Any id on the view is ignored.

        Raises:
            TenantMismatchError: The view's tenant differs from ``tenant_id``
            DuplicateEntityError: The unique field is already taken in the tenant
            EntityNotFoundError: A referenced entity does not exist
        """
        logger.info(f"Service: Creating {self.kind.name} '{view.label()}' for tenant {tenant_id}")
        self.validator.validate_payload_tenant(tenant_id, view)
        candidate = view.model_copy(update={"id": None})
        async with self.transaction():
            self.validator.validate_unique(candidate, await self.store.list_by_tenant(tenant_id))
            await self._resolve_references(tenant_id, candidate)
            created = await self.store.insert(candidate)
        logger.info(f"Service: Created {self.kind.name} {created.id} for tenant {tenant_id}")
        return created

    async def update_entity(self, tenant_id: int, view: TenantScopedEntity) -> TenantScopedEntity:
        """
        Apply a view's fields to the persisted entity it identifies.

        Checks run in this order: existence of ``view.id``; the persisted
        entity's tenant (a different tenant is a forbidden tenant change);
        the view's own tenant; uniqueness; the entities it references. The
        persisted id and tenant are kept.

        A view without an id cannot identify anything. Its payload tenant is checked
        first, and if that passes the update fails as not found.
        """
        logger.info(f"Service: Updating {self.kind.name} {view.id} for tenant {tenant_id}")
        if view.id is None:
            self.validator.validate_payload_tenant(tenant_id, view)
            self.validator.require_found_for_update(view.id, None)
        async with self.transaction():
            found = self.validator.require_found_for_update(
                view.id, await self.store.find_by_id(view.id)
            )
            self.validator.validate_tenant_unchanged(tenant_id, found)
            self.validator.validate_payload_tenant(tenant_id, view)
            updated = self.kind.copy_fields(found, view)
            self.validator.validate_unique(updated, await self.store.list_by_tenant(tenant_id))
            await self._resolve_references(tenant_id, updated)
            await self.store.update(updated)
        logger.info(f"Service: Updated {self.kind.name} {updated.id} for tenant {tenant_id}")
        return updated

    async def delete_entity(self, tenant_id: int, entity_id: int) -> bool:
        """
        Delete an entity. Deleting an unknown id is a no-op that returns False.

        Raises:
            TenantMismatchError: The entity belongs to another tenant
        """
        logger.info(f"Service: Deleting {self.kind.name} {entity_id} for tenant {tenant_id}")
        async with self.transaction():
            found = await self.store.find_by_id(entity_id)
            if found is None:
                logger.info(f"Service: {self.kind.name} {entity_id} does not exist; nothing to delete")
                return False
            self.validator.validate_owner(tenant_id, found)
            return await self.store.delete_by_id(entity_id)
