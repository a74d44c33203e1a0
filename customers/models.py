"""
Expose the ORM models to Django's app registry.
"""
from customers.infrastructure.models import CustomerAccessToken, QRCode  # noqa: F401
