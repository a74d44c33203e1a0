"""
UpdateDistributorCommand.

Command to edit a distributor. The password is changed only when a
non-empty value is given.
"""

import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass
class UpdateDistributorCommand:
    """Command to update a distributor."""

    distributor_id: uuid.UUID
    name: str
    email: str
    contact_person: Optional[str] = None
    alternative_email: Optional[str] = None
    telephone: Optional[str] = None
    notes: Optional[str] = None
    password: Optional[str] = None
