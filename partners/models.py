"""
Expose the ORM models to Django's app registry.
"""
from partners.infrastructure.models import (  # noqa: F401
    Distributor,
    Location,
    Seller,
    SellerConfig,
)
