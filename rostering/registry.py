# rostering/registry.py
from typing import Dict, Tuple

from .contract import CONTRACT
from .entities.kinds import EntityKind
from .skill import SKILL
from .spot import SPOT

# Every kind served by the API, removed with its tenant and cleared by the admin reset
ENTITY_KINDS: Tuple[EntityKind, ...] = (SKILL, SPOT, CONTRACT)

_KINDS_BY_PATH: Dict[str, EntityKind] = {kind.path: kind for kind in ENTITY_KINDS}


def get_entity_kind(path: str) -> EntityKind:
    """Look up a registered kind by its URL segment. Raises KeyError if unknown."""
    return _KINDS_BY_PATH[path]
