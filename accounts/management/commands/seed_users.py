"""
Django management command to create the default accounts.

Creates:
- The admin account (admin@elocalpass.com)
- Two seller accounts
- A sample distributor -> location -> seller chain
- A sample QR code and customer access token

Existing records are left untouched, so the command can be re-run.
"""

import logging
import secrets
from datetime import timedelta
from decimal import Decimal

from django.contrib.auth.hashers import make_password
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from accounts.infrastructure.models import UserAccount
from customers.infrastructure.models import CustomerAccessToken, QRCode
from partners.infrastructure.models import Distributor, Location, Seller, SellerConfig

logger = logging.getLogger(__name__)

DEFAULT_USERS = [
    ("admin@elocalpass.com", "Admin User", "admin123", "ADMIN"),
    ("seller@elocalpass.com", "Seller User", "seller123", "SELLER"),
    ("seller@riucancun.com", "Pedrita Gomez", "pedrita123", "SELLER"),
]


class Command(BaseCommand):
    """Command to seed default accounts."""

    help = "Create the default admin and seller accounts and a sample partner chain"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--skip-hierarchy",
            action="store_true",
            help="Only create the default accounts",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        with transaction.atomic():
            accounts = {email: self.create_account(email, name, password, role)
                        for email, name, password, role in DEFAULT_USERS}

            if not options["skip_hierarchy"]:
                self.create_hierarchy(accounts["seller@riucancun.com"])

        self.stdout.write("\nDefault accounts:")
        for email, _, password, role in DEFAULT_USERS:
            self.stdout.write(f"  {role:<8} {email} / {password}")

    def create_account(self, email: str, name: str, password: str, role: str) -> UserAccount:
        """Create an account if the email is not taken yet."""
        # pylint: disable=no-member
        account, created = UserAccount.objects.get_or_create(
            email=email,
            defaults={"name": name, "password": make_password(password), "role": role},
        )
        if created:
            logger.info("Created %s account %s", role, email)
            # pylint: disable=no-member
            self.stdout.write(self.style.SUCCESS(f"Created {role.lower()} account: {email}"))
        else:
            # pylint: disable=no-member
            self.stdout.write(self.style.WARNING(f"Account '{email}' already exists"))
        return account

    def create_hierarchy(self, seller_account: UserAccount):
        """Create a sample distributor, location and seller."""
        distributor_account = self.create_account(
            "distributor@riuhotels.com", "Riu Hotels", "distributor123", "DISTRIBUTOR"
        )
        location_account = self.create_account(
            "location@riucancun.com", "Riu Cancun", "location123", "LOCATION"
        )

        # pylint: disable=no-member
        distributor, _ = Distributor.objects.get_or_create(
            user=distributor_account,
            defaults={
                "name": "Riu Hotels",
                "contact_person": "Maria Lopez",
                "email": distributor_account.email,
                "telephone": "+52 998 000 0000",
            },
        )
        location, _ = Location.objects.get_or_create(
            user=location_account,
            defaults={
                "distributor": distributor,
                "name": "Riu Cancun",
                "email": location_account.email,
            },
        )
        seller, created = Seller.objects.get_or_create(
            user=seller_account,
            defaults={"location": location, "name": seller_account.name},
        )
        if created:
            SellerConfig.objects.create(
                seller=seller,
                default_guests=2,
                default_days=3,
                fixed_price=Decimal("25.00"),
            )
            self.create_sample_access(seller)

        # pylint: disable=no-member
        self.stdout.write(
            self.style.SUCCESS(f"Sample chain: {distributor.name} -> {location.name} -> {seller.name}")
        )

    def create_sample_access(self, seller: Seller):
        """Create a QR code for a demo customer and print its access token."""
        now = timezone.now()
        # pylint: disable=no-member
        qr_code = QRCode.objects.create(
            code=f"EL-{secrets.token_hex(4).upper()}",
            seller=seller,
            customer_name="Demo Customer",
            customer_email="customer@example.com",
            guests=2,
            days=3,
            cost=Decimal("25.00"),
            expires_at=now + timedelta(days=3),
        )
        access_token = CustomerAccessToken.objects.create(
            token=secrets.token_urlsafe(32),
            qr_code=qr_code,
            customer_name=qr_code.customer_name,
            customer_email=qr_code.customer_email,
            expires_at=now + timedelta(days=30),
        )
        # pylint: disable=no-member
        self.stdout.write(
            self.style.SUCCESS(f"Sample customer access token: {access_token.token}")
        )
