"""
Customer access DTOs for API responses.
"""
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List


@dataclass
class QRCodeDTO:
    """DTO for a customer's QR code."""

    id: uuid.UUID
    code: str
    seller_id: uuid.UUID
    customer_name: str
    customer_email: str
    guests: int
    days: int
    cost: Decimal
    expires_at: datetime
    is_active: bool
    created_at: datetime


@dataclass
class CustomerAccessDTO:
    """DTO for a redeemed access token."""

    name: str
    email: str
    language: str
    qr_codes: List[QRCodeDTO] = field(default_factory=list)
