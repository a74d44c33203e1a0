"""
Partner hierarchy as seen by the activation engine.
"""

import uuid
from dataclasses import dataclass

from core.domain.value_objects import EntityKind


@dataclass(frozen=True)
class HierarchyNode:
    """A distributor, location or seller reduced to its activation state."""

    kind: EntityKind
    id: uuid.UUID
    name: str
    is_active: bool

    def __str__(self) -> str:
        return f"{self.kind.value} {self.id}"
