# rostering/entities/kinds.py
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Tuple, Type, TypeVar

from .models import TenantScopedEntity

E = TypeVar("E", bound=TenantScopedEntity)

# Called with the call's tenant and the entity about to be written
ReferenceResolver = Callable[[int, TenantScopedEntity], Awaitable[None]]


@dataclass(frozen=True)
class EntityKind:
    """
    Descriptor of one entity kind sharing the tenant-scoped lifecycle.

    Attributes:
        name: Kind name used in messages (e.g. "Skill")
        path: URL segment and storage discriminator (e.g. "skill")
        model: Pydantic model used as view and entity
        fields: Entity-specific fields persisted as data and copied on update
        unique_field: Field whose value must be unique per tenant, if any
        resolve_references: Checks the entities referenced by a candidate, if the
            kind has any. Runs inside the write's transaction and raises the
            same failures as a read of the referenced entity.
    """

    name: str
    path: str
    model: Type[TenantScopedEntity]
    fields: Tuple[str, ...]
    unique_field: Optional[str] = "name"
    resolve_references: Optional[ReferenceResolver] = None

    def copy_fields(self, persisted: E, view: TenantScopedEntity) -> E:
        """Apply the view's entity-specific fields onto the persisted entity, keeping id and tenant."""
        return persisted.model_copy(update={field: getattr(view, field) for field in self.fields})
