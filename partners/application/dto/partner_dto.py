"""
Partner DTOs for API responses.
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from accounts.application.dto.account_dto import AccountSummaryDTO


@dataclass
class SellerConfigDTO:
    """DTO for seller QR configuration."""

    send_method: str
    landing_page_required: bool
    allow_custom_guests_days: bool
    default_guests: int
    default_days: int
    pricing_type: str
    fixed_price: Decimal
    send_rebuy_email: bool


@dataclass
class SellerDTO:
    """DTO for seller information."""

    id: uuid.UUID
    location_id: uuid.UUID
    name: str
    is_active: bool
    user: Optional[AccountSummaryDTO]
    config: Optional[SellerConfigDTO]
    created_at: datetime


@dataclass
class LocationDTO:
    """DTO for location information, with its sellers."""

    id: uuid.UUID
    distributor_id: uuid.UUID
    name: str
    is_active: bool
    contact_person: Optional[str]
    email: Optional[str]
    telephone: Optional[str]
    notes: Optional[str]
    user: Optional[AccountSummaryDTO]
    created_at: datetime
    sellers: List[SellerDTO] = field(default_factory=list)

    @property
    def seller_count(self) -> int:
        return len(self.sellers)


@dataclass
class DistributorSummaryDTO:
    """DTO for a row of the distributor list."""

    id: uuid.UUID
    name: str
    is_active: bool
    user: Optional[AccountSummaryDTO]
    location_count: int
    created_at: datetime


@dataclass
class DistributorDTO:
    """DTO for distributor details, with its locations."""

    id: uuid.UUID
    name: str
    is_active: bool
    contact_person: Optional[str]
    email: Optional[str]
    alternative_email: Optional[str]
    telephone: Optional[str]
    notes: Optional[str]
    user: Optional[AccountSummaryDTO]
    created_at: datetime
    locations: List[LocationDTO] = field(default_factory=list)
