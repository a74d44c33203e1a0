"""
Expose the ORM models to Django's app registry.
"""
from accounts.infrastructure.models import UserAccount  # noqa: F401
