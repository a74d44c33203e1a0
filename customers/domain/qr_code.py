"""
QRCode domain entity.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class QRCode:
    """A pass issued by a seller to a customer."""

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
