"""
CustomerAccessToken domain entity.

An access token lets a customer view their QR codes without an
account. Tokens are re-readable until they expire; the first read is
recorded in ``used_at``.

The customer email is validated when a token is issued and read back
exactly as stored.
"""

import secrets
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Optional

from core.domain.value_objects import Email

DEFAULT_TOKEN_TTL = timedelta(days=30)


@dataclass(frozen=True)
class CustomerAccessToken:
    """CustomerAccessToken domain entity."""

    id: uuid.UUID
    token: str
    customer_name: str
    customer_email: str
    qr_code_id: Optional[uuid.UUID]
    expires_at: datetime
    used_at: Optional[datetime]
    created_at: datetime

    def __post_init__(self):
        """Validate access token entity."""
        if not self.token or len(self.token.strip()) == 0:
            raise ValueError("Token cannot be empty")
        if self.expires_at.tzinfo is None:
            raise ValueError("Expiry must be timezone-aware")

    @classmethod
    def issue(
        cls,
        customer_name: str,
        customer_email: str,
        qr_code_id: Optional[uuid.UUID] = None,
        ttl: timedelta = DEFAULT_TOKEN_TTL,
        now: Optional[datetime] = None,
    ) -> "CustomerAccessToken":
        """
        Issue a new, unused token.

        Args:
            customer_name: Customer display name
            customer_email: Customer email the token resolves to
            qr_code_id: QR code the token was issued with
            ttl: Time to live
            now: Issue time (defaults to the current time)

        Returns:
            CustomerAccessToken entity instance
        """
        now = now or datetime.now(timezone.utc)
        return cls(
            id=uuid.uuid4(),
            token=secrets.token_urlsafe(32),
            customer_name=customer_name.strip(),
            customer_email=str(Email(customer_email)),
            qr_code_id=qr_code_id,
            expires_at=now + ttl,
            used_at=None,
            created_at=now,
        )

    def is_expired(self, now: datetime) -> bool:
        """Check expiry; a token is still valid at exactly ``expires_at``."""
        return now > self.expires_at

    @property
    def is_used(self) -> bool:
        return self.used_at is not None

    def mark_used(self, now: datetime) -> "CustomerAccessToken":
        """Return a copy recording the first read; later reads keep the first time."""
        if self.used_at is not None:
            return self
        return replace(self, used_at=now)
