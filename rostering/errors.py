# rostering/errors.py
from fastapi import status
from typing import Any, Dict


class RosteringError(Exception):
    """
    Base class for failures surfaced to API callers.

    Each subclass carries the HTTP status the transport layer answers with and
    a stable ``exception_class`` tag rendered next to the message in the error body.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    exception_class: str = "RosteringError"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_body(self) -> Dict[str, Any]:
        return {
            "exceptionMessage": self.message,
            "exceptionClass": self.exception_class,
        }


class EntityNotFoundError(RosteringError):
    """The referenced id does not exist for the entity kind."""

    status_code = status.HTTP_404_NOT_FOUND
    exception_class = "EntityNotFound"


class TenantMismatchError(RosteringError):
    """
    The tenant of a payload or persisted entity differs from the tenant
    the call is scoped to.
    """

    exception_class = "TenantMismatch"

    def __init__(self, tenant_id: Any, persistable: str, entity_tenant_id: Any):
        self.tenant_id = tenant_id
        self.entity_tenant_id = entity_tenant_id
        super().__init__(
            f"The tenantId ({tenant_id}) does not match the persistable "
            f"({persistable})'s tenantId ({entity_tenant_id})."
        )


class TenantChangeForbiddenError(RosteringError):
    """An update tried to move an existing entity into another tenant."""

    exception_class = "TenantChangeForbidden"

    def __init__(self, kind_name: str, tenant_id: Any):
        self.tenant_id = tenant_id
        super().__init__(f"{kind_name} entity with tenantId ({tenant_id}) cannot change tenants.")


class DuplicateEntityError(RosteringError):
    """A second entity of the same kind and tenant would share a unique field value."""

    exception_class = "DuplicateEntity"


class StorageFailureError(RosteringError):
    """The storage backend failed; the current operation was rolled back."""

    exception_class = "StorageFailure"
