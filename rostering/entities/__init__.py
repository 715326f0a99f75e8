# rostering/entities/__init__.py
"""
Tenant-scoped entity lifecycle.

One parameterized implementation of store, validator, service and router,
shared by every entity kind described by an ``EntityKind``.
"""

from .models import TenantScopedEntity
from .kinds import EntityKind
from .storage_interfaces import AbstractEntityStore
from .sqlite_entity_store import SQLiteEntityStore, get_sqlite_entity_store
from .validator import EntityValidator
from .service import EntityLifecycleService
from .endpoints import build_entity_router

__all__ = [
    "TenantScopedEntity",
    "EntityKind",
    # Storage layer abstractions and implementations
    "AbstractEntityStore",
    "SQLiteEntityStore",
    "get_sqlite_entity_store",
    # Rules and orchestration
    "EntityValidator",
    "EntityLifecycleService",
    # API endpoints
    "build_entity_router"
]
