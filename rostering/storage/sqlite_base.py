# rostering/storage/sqlite_base.py
import asyncio
import sqlite3
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from ..errors import StorageFailureError
from ..settings import settings

logger = logging.getLogger(__name__)

# Global connection instance to ensure single connection per application lifecycle
_db_connection: Optional[sqlite3.Connection] = None
# Serializes transactions on the shared connection; created together with it
_db_lock: Optional[asyncio.Lock] = None

# Range of a SQLite INTEGER; larger Python ints cannot be bound as parameters
SQLITE_INTEGER_MIN = -2**63
SQLITE_INTEGER_MAX = 2**63 - 1


def fits_sqlite_integer(value: int) -> bool:
    """Whether ``value`` can be stored in, or compared against, an INTEGER column."""
    return SQLITE_INTEGER_MIN <= value <= SQLITE_INTEGER_MAX


async def get_sqlite_db_connection() -> sqlite3.Connection:
    """
    Get or create a SQLite database connection with proper initialization.

    Uses a singleton pattern to maintain a single connection throughout
    the application lifecycle. The connection runs in autocommit mode
    (``isolation_level=None``); multi-statement work goes through
    ``sqlite_transaction()``.

    Raises:
        StorageFailureError: If the database cannot be opened or initialized
    """
    global _db_connection, _db_lock
    if _db_connection is None:
        try:
            db_path = Path(settings.sqlite_db_path).resolve()
            db_path.parent.mkdir(parents=True, exist_ok=True)

            logger.info(f"Attempting to connect to SQLite DB at: {db_path}")

            # Enable thread-safe access for async/FastAPI compatibility
            conn = sqlite3.connect(str(db_path), check_same_thread=False, isolation_level=None)
            conn.row_factory = sqlite3.Row
            await init_sqlite_db(conn)

            _db_connection = conn
            _db_lock = asyncio.Lock()
            logger.info(f"Successfully connected to SQLite DB: {db_path}")
        except sqlite3.Error as e:
            logger.error(
                f"Error connecting to SQLite database at {settings.sqlite_db_path}: {e}",
                exc_info=True
            )
            raise StorageFailureError(f"Could not open the database: {e}") from e
    return _db_connection


async def init_sqlite_db(conn: Optional[sqlite3.Connection] = None):
    """
    Initialize the SQLite database schema.

    Uses IF NOT EXISTS to safely handle repeated initialization calls.
    """
    db_conn = conn or await get_sqlite_db_connection()
    cursor = db_conn.cursor()

    # Tenant registry; tenants themselves are not tenant-scoped
    cursor.execute('''
    CREATE TABLE IF NOT EXISTS rostering_tenants (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL UNIQUE
    )
    ''')
    logger.info("Ensured 'rostering_tenants' table exists.")

    # Every tenant-scoped entity of every kind. AUTOINCREMENT keeps ids unique
    # across kinds and tenants and never hands out an id twice.
    cursor.execute('''
    CREATE TABLE IF NOT EXISTS rostering_entities (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        kind TEXT NOT NULL,
        tenant_id INTEGER NOT NULL,
        data TEXT NOT NULL
    )
    ''')
    cursor.execute('''
    CREATE INDEX IF NOT EXISTS ix_rostering_entities_kind_tenant
    ON rostering_entities (kind, tenant_id)
    ''')
    logger.info("Ensured 'rostering_entities' table exists.")

    logger.info("SQLite database schema initialized/verified.")


@asynccontextmanager
async def sqlite_transaction() -> AsyncIterator[sqlite3.Connection]:
    """
    Run the enclosed block as one SQLite transaction.

    Transactions are serialized through a process-wide lock, so validation reads
    and the following writes are never interleaved with another operation.
    Commits on success and rolls back on any exception; the exception propagates.
    """
    conn = await get_sqlite_db_connection()
    if _db_lock is None:
        raise StorageFailureError("Could not begin transaction: the database connection is not initialized.")
    async with _db_lock:
        try:
            conn.execute("BEGIN IMMEDIATE")
        except sqlite3.Error as e:
            logger.error(f"Could not begin SQLite transaction: {e}", exc_info=True)
            raise StorageFailureError(f"Could not begin transaction: {e}") from e
        try:
            yield conn
        except BaseException:
            conn.rollback()
            logger.debug("SQLite transaction rolled back.")
            raise
        try:
            conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Could not commit SQLite transaction: {e}", exc_info=True)
            conn.rollback()
            raise StorageFailureError(f"Could not commit transaction: {e}") from e


async def close_sqlite_db_connection():
    """
    Properly close the global SQLite database connection.

    Should be called during application shutdown to ensure
    proper cleanup of database resources.
    """
    global _db_connection, _db_lock
    if _db_connection is not None:
        logger.info("Closing SQLite DB connection.")
        _db_connection.close()
        _db_connection = None
        _db_lock = None
        logger.info("SQLite DB connection closed.")
