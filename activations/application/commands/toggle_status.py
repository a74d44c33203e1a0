"""
ToggleStatusCommand.

Command to flip the active flag of a distributor, location or seller.
"""

import uuid
from dataclasses import dataclass

from core.domain.value_objects import EntityKind


@dataclass
class ToggleStatusCommand:
    """Command to toggle an entity's status."""

    entity_kind: EntityKind
    entity_id: uuid.UUID
