# rostering/tenants/sqlite_tenant_store.py
import sqlite3
import logging
from typing import Optional, List

from .storage_interfaces import AbstractTenantStore
from .models import Tenant, TenantCreate
from ..errors import StorageFailureError
from ..storage.sqlite_base import fits_sqlite_integer, get_sqlite_db_connection

logger = logging.getLogger(__name__)


class SQLiteTenantStore(AbstractTenantStore):
    """SQLite implementation of the tenant storage interface."""

    async def initialize(self) -> None:
        """Initialize the tenant store by ensuring database and table exist."""
        await get_sqlite_db_connection()
        logger.info("SQLiteTenantStore initialized.")

    async def teardown(self) -> None:
        """Clean up resources. Connection is managed globally so no action needed."""
        logger.info("SQLiteTenantStore teardown (connection managed globally).")

    async def _execute_query(self, query: str, params: tuple = ()) -> sqlite3.Cursor:
        """
        Execute a SQL query on the shared connection.

        Raises:
            StorageFailureError: If query execution fails
        """
        conn = await get_sqlite_db_connection()
        try:
            return conn.execute(query, params)
        except sqlite3.Error as e:
            logger.error(f"Store: SQLite error executing query '{query}': {e}", exc_info=True)
            raise StorageFailureError(f"Storage failure for Tenant entities: {e}") from e

    def _row_to_tenant(self, row: Optional[sqlite3.Row]) -> Optional[Tenant]:
        if not row:
            return None
        return Tenant(id=row["id"], name=row["name"])

    async def create_tenant(self, tenant_create: TenantCreate) -> Tenant:
        cursor = await self._execute_query(
            "INSERT INTO rostering_tenants (name) VALUES (?)", (tenant_create.name,)
        )
        return Tenant(id=cursor.lastrowid, name=tenant_create.name)

    async def get_tenant(self, tenant_id: int) -> Optional[Tenant]:
        if not fits_sqlite_integer(tenant_id):
            return None
        cursor = await self._execute_query(
            "SELECT id, name FROM rostering_tenants WHERE id = ?", (tenant_id,)
        )
        return self._row_to_tenant(cursor.fetchone())

    async def get_tenant_by_name(self, name: str) -> Optional[Tenant]:
        cursor = await self._execute_query(
            "SELECT id, name FROM rostering_tenants WHERE name = ?", (name,)
        )
        return self._row_to_tenant(cursor.fetchone())

    async def list_tenants(self) -> List[Tenant]:
        cursor = await self._execute_query("SELECT id, name FROM rostering_tenants ORDER BY id")
        return [self._row_to_tenant(row) for row in cursor.fetchall()]

    async def delete_tenant(self, tenant_id: int) -> bool:
        if not fits_sqlite_integer(tenant_id):
            return False
        cursor = await self._execute_query("DELETE FROM rostering_tenants WHERE id = ?", (tenant_id,))
        return cursor.rowcount > 0

    async def clear(self) -> int:
        cursor = await self._execute_query("DELETE FROM rostering_tenants")
        return cursor.rowcount


# Singleton instance management
_sqlite_tenant_store_instance: Optional[SQLiteTenantStore] = None


async def get_sqlite_tenant_store() -> SQLiteTenantStore:
    """
    Get or create the singleton SQLiteTenantStore instance.

    Ensures only one instance exists and is properly initialized.
    """
    global _sqlite_tenant_store_instance
    if _sqlite_tenant_store_instance is None:
        _sqlite_tenant_store_instance = SQLiteTenantStore()
        await _sqlite_tenant_store_instance.initialize()
    return _sqlite_tenant_store_instance
