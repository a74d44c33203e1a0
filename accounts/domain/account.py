"""
Account domain entity.

An account holds the credentials and role claim of a user. Every
distributor, location and seller owns exactly one account; admins
own accounts that are not attached to the partner hierarchy.
"""

import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from core.domain.value_objects import Email, UserRole


@dataclass(frozen=True)
class Account:
    """
    Account domain entity.

    ``password_hash`` is produced by the password hasher collaborator;
    the entity never sees a raw password.
    """

    id: uuid.UUID
    name: str
    email: Email
    password_hash: str
    role: UserRole
    is_active: bool
    created_at: datetime

    def __post_init__(self):
        """Validate account entity."""
        if not self.password_hash:
            raise ValueError("Password hash is required")
        if not isinstance(self.role, UserRole):
            raise ValueError(f"Invalid role: {self.role}")

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        password_hash: str,
        role: UserRole,
        account_id: Optional[uuid.UUID] = None,
    ) -> "Account":
        """
        Create a new active Account entity.

        Args:
            name: Display name
            email: Login email
            password_hash: Hashed password
            role: Role claim
            account_id: Optional UUID (generated if not provided)

        Returns:
            Account entity instance
        """
        return cls(
            id=account_id or uuid.uuid4(),
            name=(name or "").strip(),
            email=Email(email),
            password_hash=password_hash,
            role=role,
            is_active=True,
            created_at=datetime.now(timezone.utc),
        )

    def with_email(self, email: str) -> "Account":
        """Return a copy with a new login email."""
        return replace(self, email=Email(email))

    def with_password_hash(self, password_hash: str) -> "Account":
        """Return a copy with a new password hash."""
        return replace(self, password_hash=password_hash)

    def with_name(self, name: str) -> "Account":
        """Return a copy with a new display name."""
        return replace(self, name=name.strip())
