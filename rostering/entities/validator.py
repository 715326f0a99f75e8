# rostering/entities/validator.py
import logging
from typing import Iterable, Optional

from .kinds import EntityKind
from .models import TenantScopedEntity
from ..errors import (
    DuplicateEntityError,
    EntityNotFoundError,
    TenantChangeForbiddenError,
    TenantMismatchError,
)

logger = logging.getLogger(__name__)


class EntityValidator:
    """
    Side-effect-free rule checks run before any store access is acted upon.

    Every check either returns quietly (or returns the checked entity) or
    raises one of the typed failures from ``rostering.errors``.
    """

    def __init__(self, kind: EntityKind):
        self.kind = kind

    def validate_payload_tenant(self, tenant_id: int, view: TenantScopedEntity) -> None:
        """The tenant embedded in a create/update payload must equal the call's tenant."""
        if view.tenant_id != tenant_id:
            logger.warning(
                f"Validator: {self.kind.name} payload tenant {view.tenant_id} "
                f"does not match path tenant {tenant_id}."
            )
            raise TenantMismatchError(tenant_id, view.label(), view.tenant_id)

    def require_found(self, entity_id: Optional[int], found: Optional[TenantScopedEntity]) -> TenantScopedEntity:
        """Existence check for read and delete-by-id lookups."""
        if found is None:
            raise EntityNotFoundError(f"No {self.kind.name} entity found with ID ({entity_id}).")
        return found

    def require_found_for_update(
        self, entity_id: Optional[int], found: Optional[TenantScopedEntity]
    ) -> TenantScopedEntity:
        """Existence check for updates; same condition as ``require_found``, different wording."""
        if found is None:
            raise EntityNotFoundError(f"{self.kind.name} entity with ID ({entity_id}) not found.")
        return found

    def validate_owner(self, tenant_id: int, found: TenantScopedEntity) -> None:
        """A persisted entity is only addressable through its own tenant."""
        if found.tenant_id != tenant_id:
            logger.warning(
                f"Validator: {self.kind.name} {found.id} belongs to tenant {found.tenant_id}, "
                f"not {tenant_id}."
            )
            raise TenantMismatchError(tenant_id, found.label(), found.tenant_id)

    def validate_tenant_unchanged(self, tenant_id: int, found: TenantScopedEntity) -> None:
        """An update may not move a persisted entity into the call's (different) tenant."""
        if found.tenant_id != tenant_id:
            logger.warning(
                f"Validator: Update would move {self.kind.name} {found.id} "
                f"from tenant {found.tenant_id} to {tenant_id}."
            )
            raise TenantChangeForbiddenError(self.kind.name, found.tenant_id)

    def validate_unique(self, candidate: TenantScopedEntity, siblings: Iterable[TenantScopedEntity]) -> None:
        """
        The kind's unique field must not repeat within the candidate's tenant.

        ``siblings`` are the persisted entities of the same tenant; the candidate
        itself (same id) is skipped so an update may keep its own value.
        """
        field = self.kind.unique_field
        if field is None:
            return
        value = getattr(candidate, field)
        for other in siblings:
            if other.id != candidate.id and getattr(other, field) == value:
                raise DuplicateEntityError(
                    f"{self.kind.name} entity with {field} ({value}) already exists "
                    f"for tenantId ({candidate.tenant_id})."
                )
