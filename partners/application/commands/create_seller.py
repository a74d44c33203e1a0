"""
CreateSellerCommand.

Command to create a seller under a location, with its QR configuration.
"""

import uuid
from dataclasses import dataclass, field
from decimal import Decimal

from core.domain.value_objects import PricingType, SendMethod


@dataclass
class SellerConfigInput:
    """QR configuration submitted with a new seller."""

    send_method: SendMethod = SendMethod.URL
    landing_page_required: bool = True
    allow_custom_guests_days: bool = False
    default_guests: int = 2
    default_days: int = 3
    pricing_type: PricingType = PricingType.FIXED
    fixed_price: Decimal = Decimal("0")
    send_rebuy_email: bool = False


@dataclass
class CreateSellerCommand:
    """Command to create a seller and its SELLER account."""

    location_id: uuid.UUID
    name: str
    email: str
    password: str
    config: SellerConfigInput = field(default_factory=SellerConfigInput)
