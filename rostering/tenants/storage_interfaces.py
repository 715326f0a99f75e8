# rostering/tenants/storage_interfaces.py
from abc import ABC, abstractmethod
from typing import Optional, List
from .models import Tenant, TenantCreate


class AbstractTenantStore(ABC):
    """
    Abstract base class defining the interface for tenant storage operations.

    Like the entity stores it is plain keyed storage; callers provide the
    transaction boundary.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the storage backend and prepare it for operations."""
        pass

    @abstractmethod
    async def teardown(self) -> None:
        """Clean up resources and properly close the storage backend."""
        pass

    @abstractmethod
    async def create_tenant(self, tenant_create: TenantCreate) -> Tenant:
        """
        Create a new tenant in the storage backend.

        Returns:
            The created tenant with its assigned id
        """
        pass

    @abstractmethod
    async def get_tenant(self, tenant_id: int) -> Optional[Tenant]:
        """Retrieve a tenant by id, or None if it does not exist."""
        pass

    @abstractmethod
    async def get_tenant_by_name(self, name: str) -> Optional[Tenant]:
        """Retrieve a tenant by its unique name, or None if it does not exist."""
        pass

    @abstractmethod
    async def list_tenants(self) -> List[Tenant]:
        """Retrieve every tenant ordered by id."""
        pass

    @abstractmethod
    async def delete_tenant(self, tenant_id: int) -> bool:
        """
        Remove a tenant from storage.

        Returns:
            True if the tenant was deleted, False if not found
        """
        pass

    @abstractmethod
    async def clear(self) -> int:
        """Remove every tenant and return how many were removed."""
        pass
