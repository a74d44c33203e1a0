"""
UpdateLocationCommand.
"""

import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass
class UpdateLocationCommand:
    """Command to update a location."""

    location_id: uuid.UUID
    name: str
    email: str
    contact_person: Optional[str] = None
    telephone: Optional[str] = None
    notes: Optional[str] = None
    password: Optional[str] = None
