# rostering/admin/__init__.py

"""
Administration module.

Provides the application reset coordinator and its API endpoint.
"""

from .service import AdminResetService
from .endpoints import admin_router

__all__ = [
    "AdminResetService",
    "admin_router"
]
