# rostering/storage/__init__.py

"""Storage module initialization.

Owns the process-wide SQLite connection, the schema and the
transaction boundary every service operation runs inside.
"""

from .sqlite_base import (
    get_sqlite_db_connection,
    init_sqlite_db,
    close_sqlite_db_connection,
    sqlite_transaction
)

__all__ = [
    "get_sqlite_db_connection",
    "init_sqlite_db",
    "close_sqlite_db_connection",
    "sqlite_transaction"
]
