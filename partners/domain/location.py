"""
Location domain entity.
"""

import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from partners.domain.distributor import ContactDetails


@dataclass(frozen=True)
class Location:
    """
    Location domain entity.

    Child of exactly one distributor; owns zero or more sellers.
    """

    id: uuid.UUID
    distributor_id: uuid.UUID
    name: str
    is_active: bool
    account_id: uuid.UUID
    contact: ContactDetails
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Validate location entity."""
        if not self.distributor_id:
            raise ValueError("Distributor ID is required")
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Location name cannot be empty")
        if len(self.name) > 255:
            raise ValueError("Location name too long")
        if not self.account_id:
            raise ValueError("Account ID is required")

    @classmethod
    def create(
        cls,
        distributor_id: uuid.UUID,
        name: str,
        account_id: uuid.UUID,
        contact: Optional[ContactDetails] = None,
        location_id: Optional[uuid.UUID] = None,
    ) -> "Location":
        """
        Create a new, active Location entity.

        Args:
            distributor_id: Owning distributor UUID
            name: Display name
            account_id: Owning account UUID
            contact: Optional contact details
            location_id: Optional UUID (generated if not provided)

        Returns:
            Location entity instance
        """
        now = datetime.now(timezone.utc)
        return cls(
            id=location_id or uuid.uuid4(),
            distributor_id=distributor_id,
            name=name.strip(),
            is_active=True,
            account_id=account_id,
            contact=contact or ContactDetails(),
            created_at=now,
            updated_at=now,
        )

    def update_details(self, name: Optional[str] = None, contact: Optional[ContactDetails] = None):
        """Create a new Location instance with edited fields."""
        return replace(
            self,
            name=name.strip() if name else self.name,
            contact=contact if contact is not None else self.contact,
            updated_at=datetime.now(timezone.utc),
        )
