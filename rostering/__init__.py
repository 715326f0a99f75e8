# rostering/__init__.py
"""
Multi-tenant rostering backend.

Tenant-scoped entity lifecycle (skills, spots, contracts), the tenant
registry and the administrative reset, served over a FastAPI REST API.
"""

__version__ = "0.1.0"
