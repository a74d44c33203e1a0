"""
Toggle status DTOs for API responses.
"""
import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass
class ToggleStatusResultDTO:
    """DTO for the outcome of a toggle request."""

    entity_kind: str
    entity_id: uuid.UUID
    is_active: bool
    accepted: bool
    blocker_kind: Optional[str] = None
    blocker_id: Optional[uuid.UUID] = None
    message: Optional[str] = None
