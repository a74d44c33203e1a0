"""
Activation domain events.

Domain events represent something that happened in the activation domain.
"""
import uuid
from dataclasses import dataclass

from core.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class EntityStatusToggled(DomainEvent):
    """Event raised when a node's active flag was flipped."""

    entity_kind: str
    entity_id: uuid.UUID
    is_active: bool

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "aggregate_id", str(self.entity_id))


@dataclass(frozen=True, kw_only=True)
class EntityActivationBlocked(DomainEvent):
    """Event raised when an activation was refused because of an inactive ancestor."""

    entity_kind: str
    entity_id: uuid.UUID
    blocker_kind: str
    blocker_id: uuid.UUID

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "aggregate_id", str(self.entity_id))
