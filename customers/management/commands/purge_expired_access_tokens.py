"""
Django management command to delete long-expired customer access tokens.

This command should be run periodically (e.g., via cron or scheduled task).
"""

import logging
from datetime import timedelta

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from customers.infrastructure.models import CustomerAccessToken as CustomerAccessTokenModel
from customers.infrastructure.repositories.django_access_token_repository import (
    DjangoAccessTokenRepository,
)

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Command to purge expired access tokens."""

    help = "Delete customer access tokens that expired more than --days ago"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--days",
            type=int,
            default=30,
            help="Retention period after expiry, in days (default: 30)",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Dry run mode - only count the tokens",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        days = options["days"]
        if days < 0:
            raise CommandError("--days must not be negative")

        cutoff = timezone.now() - timedelta(days=days)
        # pylint: disable=no-member
        count = CustomerAccessTokenModel.objects.filter(expires_at__lt=cutoff).count()
        self.stdout.write(f"Found {count} access token(s) expired before {cutoff.isoformat()}")

        if options["dry_run"]:
            # pylint: disable=no-member
            self.stdout.write(self.style.WARNING("DRY RUN - No tokens will be deleted"))
            return

        deleted = async_to_sync(DjangoAccessTokenRepository().delete_expired_before)(cutoff)
        logger.info("Purged %d expired access token(s)", deleted)
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted} access token(s)"))
