"""
Distributor domain entity.

The distributor is the root of the partner hierarchy.
It contains business logic and is independent of infrastructure.
"""

import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional


@dataclass(frozen=True)
class ContactDetails:
    """Optional contact fields shared by distributors and locations."""

    contact_person: Optional[str] = None
    email: Optional[str] = None
    alternative_email: Optional[str] = None
    telephone: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class Distributor:
    """
    Distributor domain entity.

    Owns zero or more locations. Its ``is_active`` flag may always be
    toggled; it gates the activation of its descendants.
    """

    id: uuid.UUID
    name: str
    is_active: bool
    account_id: uuid.UUID
    contact: ContactDetails
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Validate distributor entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Distributor name cannot be empty")
        if len(self.name) > 255:
            raise ValueError("Distributor name too long")
        if not self.account_id:
            raise ValueError("Account ID is required")

    @classmethod
    def create(
        cls,
        name: str,
        account_id: uuid.UUID,
        contact: Optional[ContactDetails] = None,
        distributor_id: Optional[uuid.UUID] = None,
    ) -> "Distributor":
        """
        Create a new, active Distributor entity.

        Args:
            name: Display name
            account_id: Owning account UUID
            contact: Optional contact details
            distributor_id: Optional UUID (generated if not provided)

        Returns:
            Distributor entity instance
        """
        now = datetime.now(timezone.utc)
        return cls(
            id=distributor_id or uuid.uuid4(),
            name=name.strip(),
            is_active=True,
            account_id=account_id,
            contact=contact or ContactDetails(),
            created_at=now,
            updated_at=now,
        )

    def update_details(self, name: Optional[str] = None, contact: Optional[ContactDetails] = None):
        """
        Create a new Distributor instance with edited fields.

        Args:
            name: New display name (unchanged when None)
            contact: New contact details (unchanged when None)

        Returns:
            New Distributor instance
        """
        return replace(
            self,
            name=name.strip() if name else self.name,
            contact=contact if contact is not None else self.contact,
            updated_at=datetime.now(timezone.utc),
        )
