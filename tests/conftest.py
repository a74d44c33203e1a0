"""
Pytest configuration and shared fixtures.
"""

import uuid
from datetime import timedelta
from decimal import Decimal

import pytest
from django.contrib.auth.hashers import make_password
from django.core.cache import cache
from django.utils import timezone

from accounts.infrastructure.models import UserAccount
from accounts.infrastructure.repositories.django_account_repository import (
    DjangoAccountRepository,
)
from activations.domain.events import EntityActivationBlocked, EntityStatusToggled
from activations.infrastructure.repositories.django_hierarchy_repository import (
    DjangoHierarchyRepository,
)
from core.domain.events import EventHandler
from core.infrastructure.event_handlers import register_event_handlers
from core.infrastructure.events import event_bus
from customers.domain.events import CustomerAccessTokenRedeemed
from customers.infrastructure.models import CustomerAccessToken, QRCode
from customers.infrastructure.repositories.django_access_token_repository import (
    DjangoAccessTokenRepository,
)
from customers.infrastructure.repositories.django_qr_code_repository import (
    DjangoQRCodeRepository,
)
from fakes import (
    InMemoryAccessTokenRepository,
    InMemoryAccountRepository,
    InMemoryDistributorRepository,
    InMemoryHierarchyRepository,
    InMemoryLocationRepository,
    InMemoryQRCodeRepository,
    InMemorySellerRepository,
)
from partners.infrastructure.models import Distributor, Location, Seller, SellerConfig
from partners.infrastructure.repositories.django_distributor_repository import (
    DjangoDistributorRepository,
)
from partners.infrastructure.repositories.django_location_repository import (
    DjangoLocationRepository,
)
from partners.infrastructure.repositories.django_seller_repository import (
    DjangoSellerRepository,
)

ADMIN_PASSWORD = "admin123"


@pytest.fixture(autouse=True)
def clear_rate_limits():
    """Start every test with empty rate limit counters."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def published_events():
    """Record every domain event published during the test."""
    events = []

    class RecordingHandler(EventHandler):
        async def handle(self, event):
            events.append(event)

    handler = RecordingHandler()
    for event_type in (EntityStatusToggled, EntityActivationBlocked, CustomerAccessTokenRedeemed):
        event_bus.subscribe(event_type, handler)

    yield events

    event_bus.clear()
    register_event_handlers()


# In-memory fakes


@pytest.fixture
def hierarchy():
    """Fixture for an in-memory HierarchyRepository."""
    return InMemoryHierarchyRepository()


@pytest.fixture
def token_store():
    """Fixture for an in-memory AccessTokenRepository."""
    return InMemoryAccessTokenRepository()


@pytest.fixture
def qr_store():
    """Fixture for an in-memory QRCodeRepository."""
    return InMemoryQRCodeRepository()


@pytest.fixture
def account_store():
    """Fixture for an in-memory AccountRepository."""
    return InMemoryAccountRepository()


@pytest.fixture
def location_store(account_store):
    """Fixture for an in-memory LocationRepository."""
    return InMemoryLocationRepository(account_store)


@pytest.fixture
def distributor_store(location_store, account_store):
    """Fixture for an in-memory DistributorRepository."""
    return InMemoryDistributorRepository(location_store, account_store)


@pytest.fixture
def seller_store(account_store):
    """Fixture for an in-memory SellerRepository."""
    return InMemorySellerRepository(account_store)


# Django repositories


@pytest.fixture
def account_repository():
    """Fixture for AccountRepository."""
    return DjangoAccountRepository()


@pytest.fixture
def distributor_repository():
    """Fixture for DistributorRepository."""
    return DjangoDistributorRepository()


@pytest.fixture
def location_repository():
    """Fixture for LocationRepository."""
    return DjangoLocationRepository()


@pytest.fixture
def seller_repository():
    """Fixture for SellerRepository."""
    return DjangoSellerRepository()


@pytest.fixture
def hierarchy_repository():
    """Fixture for HierarchyRepository."""
    return DjangoHierarchyRepository()


@pytest.fixture
def access_token_repository():
    """Fixture for AccessTokenRepository."""
    return DjangoAccessTokenRepository()


@pytest.fixture
def qr_code_repository():
    """Fixture for QRCodeRepository."""
    return DjangoQRCodeRepository()


# Database rows


def create_account(role: str, email: str = None, password: str = "secret123", name: str = "") -> UserAccount:
    """Create a UserAccount row with a hashed password."""
    return UserAccount.objects.create(
        name=name or role.title(),
        email=email or f"{role.lower()}-{uuid.uuid4().hex[:8]}@example.com",
        password=make_password(password),
        role=role,
    )


@pytest.fixture
def make_account(db):
    """Factory creating a UserAccount row."""
    return create_account


@pytest.fixture
def make_chain(db):
    """
    Factory creating a distributor -> location -> seller chain.

    Returns a dict with the ``distributor``, ``location`` and ``seller`` rows.
    """

    def _make(distributor_active=True, location_active=True, seller_active=True):
        suffix = uuid.uuid4().hex[:6]
        distributor = Distributor.objects.create(
            name=f"Distributor {suffix}",
            is_active=distributor_active,
            user=create_account("DISTRIBUTOR"),
        )
        location = Location.objects.create(
            distributor=distributor,
            name=f"Location {suffix}",
            is_active=location_active,
            user=create_account("LOCATION"),
        )
        seller = Seller.objects.create(
            location=location,
            name=f"Seller {suffix}",
            is_active=seller_active,
            user=create_account("SELLER"),
        )
        SellerConfig.objects.create(seller=seller)
        return {"distributor": distributor, "location": location, "seller": seller}

    return _make


@pytest.fixture
def make_qr_code(db):
    """Factory creating a QR code row for a seller."""

    def _make(seller, customer_email="customer@example.com", created_at=None, code=None):
        qr_code = QRCode.objects.create(
            code=code or uuid.uuid4().hex[:12].upper(),
            seller=seller,
            customer_name="Jane Customer",
            customer_email=customer_email,
            guests=2,
            days=3,
            cost=Decimal("25.00"),
            expires_at=timezone.now() + timedelta(days=3),
        )
        if created_at is not None:
            # auto_now_add ignores explicit values on create
            QRCode.objects.filter(id=qr_code.id).update(created_at=created_at)
            qr_code.refresh_from_db()
        return qr_code

    return _make


@pytest.fixture
def make_access_token(db):
    """Factory creating a customer access token row."""

    def _make(expires_in=timedelta(days=1), used_at=None, customer_email="customer@example.com",
              qr_code=None):
        return CustomerAccessToken.objects.create(
            token=f"tok-{uuid.uuid4().hex}",
            qr_code=qr_code,
            customer_name="Jane Customer",
            customer_email=customer_email,
            expires_at=timezone.now() + expires_in,
            used_at=used_at,
        )

    return _make


# HTTP clients


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def admin_account(db):
    """Fixture for an active ADMIN account."""
    return create_account("ADMIN", email="admin@example.com", password=ADMIN_PASSWORD, name="Admin")


@pytest.fixture
def admin_client(api_client, admin_account):
    """API client signed in as an ADMIN."""
    response = api_client.post(
        "/api/auth/login",
        {"email": admin_account.email, "password": ADMIN_PASSWORD},
        format="json",
    )
    assert response.status_code == 200
    return api_client
