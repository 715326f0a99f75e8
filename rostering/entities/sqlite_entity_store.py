# rostering/entities/sqlite_entity_store.py
import sqlite3
import logging
import json
from typing import Dict, Optional, List

from pydantic import ValidationError

from .kinds import EntityKind
from .models import TenantScopedEntity
from .storage_interfaces import AbstractEntityStore
from ..errors import StorageFailureError
from ..storage.sqlite_base import fits_sqlite_integer, get_sqlite_db_connection

logger = logging.getLogger(__name__)


class SQLiteEntityStore(AbstractEntityStore):
    """
    SQLite implementation of the entity storage interface.

    All kinds share the ``rostering_entities`` table; rows are told apart by
    the ``kind`` column and the entity-specific fields live in a JSON ``data`` blob.
    """

    def __init__(self, kind: EntityKind):
        self.kind = kind

    async def initialize(self) -> None:
        """Initialize the store by ensuring database and table exist."""
        await get_sqlite_db_connection()
        logger.info(f"SQLiteEntityStore[{self.kind.path}] initialized.")

    async def teardown(self) -> None:
        """Clean up resources. Connection is managed globally so no action needed."""
        logger.info(f"SQLiteEntityStore[{self.kind.path}] teardown (connection managed globally).")

    async def _execute_query(self, query: str, params: tuple = ()) -> sqlite3.Cursor:
        """
        Execute a SQL query on the shared connection.

        Statements run inside the caller's transaction when one is open,
        and autocommit otherwise.

        Raises:
            StorageFailureError: If query execution fails
        """
        conn = await get_sqlite_db_connection()
        try:
            return conn.execute(query, params)
        except sqlite3.Error as e:
            logger.error(f"Store: SQLite error executing query '{query}': {e}", exc_info=True)
            raise StorageFailureError(f"Storage failure for {self.kind.name} entities: {e}") from e

    def _serialize(self, entity: TenantScopedEntity) -> str:
        return json.dumps(entity.model_dump(include=set(self.kind.fields)))

    def _row_to_entity(self, row: Optional[sqlite3.Row]) -> Optional[TenantScopedEntity]:
        if not row:
            return None
        try:
            data: Dict = json.loads(row["data"])
            return self.kind.model.model_validate(
                {"id": row["id"], "tenant_id": row["tenant_id"], **data}
            )
        except (ValueError, ValidationError) as e:
            logger.error(f"Store: Corrupt {self.kind.name} row with id {row['id']}: {e}", exc_info=True)
            raise StorageFailureError(
                f"Stored {self.kind.name} entity with ID ({row['id']}) could not be read."
            ) from e

    async def insert(self, entity: TenantScopedEntity) -> TenantScopedEntity:
        query = "INSERT INTO rostering_entities (kind, tenant_id, data) VALUES (?, ?, ?)"
        cursor = await self._execute_query(
            query, (self.kind.path, entity.tenant_id, self._serialize(entity))
        )
        return entity.model_copy(update={"id": cursor.lastrowid})

    async def find_by_id(self, entity_id: int) -> Optional[TenantScopedEntity]:
        if not fits_sqlite_integer(entity_id):
            return None
        query = """
            SELECT id, tenant_id, data
            FROM rostering_entities
            WHERE id = ? AND kind = ?
        """
        cursor = await self._execute_query(query, (entity_id, self.kind.path))
        return self._row_to_entity(cursor.fetchone())

    async def update(self, entity: TenantScopedEntity) -> None:
        query = "UPDATE rostering_entities SET data = ? WHERE id = ? AND kind = ?"
        await self._execute_query(query, (self._serialize(entity), entity.id, self.kind.path))

    async def delete_by_id(self, entity_id: int) -> bool:
        if not fits_sqlite_integer(entity_id):
            return False
        query = "DELETE FROM rostering_entities WHERE id = ? AND kind = ?"
        cursor = await self._execute_query(query, (entity_id, self.kind.path))
        return cursor.rowcount > 0

    async def list_by_tenant(self, tenant_id: int) -> List[TenantScopedEntity]:
        if not fits_sqlite_integer(tenant_id):
            return []
        query = """
            SELECT id, tenant_id, data
            FROM rostering_entities
            WHERE kind = ? AND tenant_id = ?
            ORDER BY id
        """
        cursor = await self._execute_query(query, (self.kind.path, tenant_id))
        return [self._row_to_entity(row) for row in cursor.fetchall()]

    async def delete_by_tenant(self, tenant_id: int) -> int:
        if not fits_sqlite_integer(tenant_id):
            return 0
        query = "DELETE FROM rostering_entities WHERE kind = ? AND tenant_id = ?"
        cursor = await self._execute_query(query, (self.kind.path, tenant_id))
        return cursor.rowcount

    async def clear(self) -> int:
        cursor = await self._execute_query(
            "DELETE FROM rostering_entities WHERE kind = ?", (self.kind.path,)
        )
        return cursor.rowcount


# One store instance per kind
_sqlite_entity_store_instances: Dict[str, SQLiteEntityStore] = {}


async def get_sqlite_entity_store(kind: EntityKind) -> SQLiteEntityStore:
    """
    Get or create the SQLiteEntityStore instance for an entity kind.

    Ensures only one instance per kind exists and is properly initialized.
    """
    store = _sqlite_entity_store_instances.get(kind.path)
    if store is None:
        store = SQLiteEntityStore(kind)
        await store.initialize()
        _sqlite_entity_store_instances[kind.path] = store
    return store
