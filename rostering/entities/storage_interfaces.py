# rostering/entities/storage_interfaces.py
from abc import ABC, abstractmethod
from typing import Optional, List

from .kinds import EntityKind
from .models import TenantScopedEntity


class AbstractEntityStore(ABC):
    """
    Abstract base class for keyed storage of one entity kind.

    Stores hold no tenant-matching logic; they are plain keyed storage.
    Tenant enforcement belongs to the validator, which keeps a store usable
    by the admin reset and tenant removal as-is. Stores never open
    transactions themselves; callers wrap them.
    """

    kind: EntityKind

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the storage backend and prepare it for operations."""
        pass

    @abstractmethod
    async def teardown(self) -> None:
        """Clean up resources and properly close the storage backend."""
        pass

    @abstractmethod
    async def insert(self, entity: TenantScopedEntity) -> TenantScopedEntity:
        """
        Persist a new entity.

        Args:
            entity: The entity to store; any id it carries is ignored

        Returns:
            A copy of the entity carrying its newly assigned id
        """
        pass

    @abstractmethod
    async def find_by_id(self, entity_id: int) -> Optional[TenantScopedEntity]:
        """Return the entity of this kind with the given id, in any tenant, or None."""
        pass

    @abstractmethod
    async def update(self, entity: TenantScopedEntity) -> None:
        """Overwrite the stored entity-specific fields of an existing entity."""
        pass

    @abstractmethod
    async def delete_by_id(self, entity_id: int) -> bool:
        """
        Remove an entity.

        Returns:
            True if the entity existed and was removed, False otherwise
        """
        pass

    @abstractmethod
    async def list_by_tenant(self, tenant_id: int) -> List[TenantScopedEntity]:
        """Return every entity of this kind owned by the tenant, ordered by id."""
        pass

    @abstractmethod
    async def delete_by_tenant(self, tenant_id: int) -> int:
        """Remove every entity of this kind owned by the tenant and return how many were removed."""
        pass

    @abstractmethod
    async def clear(self) -> int:
        """Remove every entity of this kind in every tenant and return how many were removed."""
        pass
