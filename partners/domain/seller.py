"""
Seller domain entity and its QR configuration.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from core.domain.value_objects import PricingType, SendMethod


@dataclass(frozen=True)
class SellerConfig:
    """
    QR issuing configuration of a seller.

    Defaults mirror the seller creation form.
    """

    send_method: SendMethod = SendMethod.URL
    landing_page_required: bool = True
    allow_custom_guests_days: bool = False
    default_guests: int = 2
    default_days: int = 3
    pricing_type: PricingType = PricingType.FIXED
    fixed_price: Decimal = Decimal("0")
    send_rebuy_email: bool = False

    def __post_init__(self):
        """Validate configuration values."""
        if self.default_guests < 1:
            raise ValueError("Default guests must be at least 1")
        if self.default_days < 1:
            raise ValueError("Default days must be at least 1")
        if self.fixed_price < 0:
            raise ValueError("Fixed price cannot be negative")


@dataclass(frozen=True)
class Seller:
    """
    Seller domain entity.

    Child of exactly one location.
    """

    id: uuid.UUID
    location_id: uuid.UUID
    name: str
    is_active: bool
    account_id: uuid.UUID
    config: Optional[SellerConfig]
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Validate seller entity."""
        if not self.location_id:
            raise ValueError("Location ID is required")
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Seller name cannot be empty")
        if not self.account_id:
            raise ValueError("Account ID is required")

    @classmethod
    def create(
        cls,
        location_id: uuid.UUID,
        name: str,
        account_id: uuid.UUID,
        config: Optional[SellerConfig] = None,
        seller_id: Optional[uuid.UUID] = None,
    ) -> "Seller":
        """
        Create a new, active Seller entity.

        Args:
            location_id: Owning location UUID
            name: Display name
            account_id: Owning account UUID
            config: Optional QR configuration
            seller_id: Optional UUID (generated if not provided)

        Returns:
            Seller entity instance
        """
        now = datetime.now(timezone.utc)
        return cls(
            id=seller_id or uuid.uuid4(),
            location_id=location_id,
            name=name.strip(),
            is_active=True,
            account_id=account_id,
            config=config,
            created_at=now,
            updated_at=now,
        )
