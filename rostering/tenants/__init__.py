# rostering/tenants/__init__.py
"""
Tenant management module initialization.

Provides the tenant registry: data models, storage abstraction, the SQLite
implementation, business logic and API endpoints.
"""

from .models import Tenant, TenantCreate
from .storage_interfaces import AbstractTenantStore
from .sqlite_tenant_store import SQLiteTenantStore, get_sqlite_tenant_store
from .service import TenantService
from .endpoints import tenants_router

__all__ = [
    # Data models for tenant operations
    "Tenant",
    "TenantCreate",
    # Storage layer abstractions and implementations
    "AbstractTenantStore",
    "SQLiteTenantStore",
    "get_sqlite_tenant_store",
    # Business logic service
    "TenantService",
    # API endpoints
    "tenants_router"
]
