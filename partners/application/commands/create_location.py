"""
CreateLocationCommand.

Command to create a location under a distributor.
"""

import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass
class CreateLocationCommand:
    """Command to create a location and its LOCATION account."""

    distributor_id: uuid.UUID
    name: str
    email: str
    password: str
    contact_person: Optional[str] = None
    telephone: Optional[str] = None
    notes: Optional[str] = None
