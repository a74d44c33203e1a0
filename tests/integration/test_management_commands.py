"""
Integration tests for management commands.
"""
from datetime import timedelta
from io import StringIO

import pytest
from django.contrib.auth.hashers import check_password
from django.core.management import call_command
from django.core.management.base import CommandError

from accounts.infrastructure.models import UserAccount
from customers.infrastructure.models import CustomerAccessToken
from partners.infrastructure.models import Distributor, Location, Seller


@pytest.mark.django_db
@pytest.mark.integration
class TestSeedUsersCommand:
    """Integration tests for seed_users."""

    def test_seed_creates_accounts_and_chain(self):
        """Test the default accounts and the sample chain are created."""
        out = StringIO()

        call_command("seed_users", stdout=out)

        admin = UserAccount.objects.get(email="admin@elocalpass.com")
        assert admin.role == "ADMIN"
        assert check_password("admin123", admin.password)
        seller = Seller.objects.get(user__email="seller@riucancun.com")
        assert seller.location.name == "Riu Cancun"
        assert seller.location.distributor.name == "Riu Hotels"
        assert seller.config.fixed_price == 25
        assert CustomerAccessToken.objects.filter(customer_email="customer@example.com").count() == 1
        assert "Sample customer access token:" in out.getvalue()

    def test_seed_is_idempotent(self):
        """Test re-running the command leaves existing rows alone."""
        call_command("seed_users", stdout=StringIO())
        out = StringIO()

        call_command("seed_users", stdout=out)

        assert UserAccount.objects.filter(email="admin@elocalpass.com").count() == 1
        assert Distributor.objects.count() == 1
        assert Location.objects.count() == 1
        assert CustomerAccessToken.objects.count() == 1
        assert "already exists" in out.getvalue()

    def test_skip_hierarchy(self):
        """Test only the accounts are created with --skip-hierarchy."""
        call_command("seed_users", "--skip-hierarchy", stdout=StringIO())

        assert UserAccount.objects.count() == 3
        assert Distributor.objects.count() == 0
        assert Seller.objects.count() == 0


@pytest.mark.django_db
@pytest.mark.integration
class TestPurgeExpiredAccessTokensCommand:
    """Integration tests for purge_expired_access_tokens."""

    def test_purge(self, make_access_token):
        """Test tokens expired past the retention window are deleted."""
        stale = make_access_token(expires_in=-timedelta(days=45))
        recent = make_access_token(expires_in=-timedelta(days=2))
        out = StringIO()

        call_command("purge_expired_access_tokens", stdout=out)

        assert not CustomerAccessToken.objects.filter(id=stale.id).exists()
        assert CustomerAccessToken.objects.filter(id=recent.id).exists()
        assert "Deleted 1 access token(s)" in out.getvalue()

    def test_purge_with_days(self, make_access_token):
        """Test --days shortens the retention window."""
        make_access_token(expires_in=-timedelta(days=2))
        make_access_token()

        call_command("purge_expired_access_tokens", "--days", "1", stdout=StringIO())

        assert CustomerAccessToken.objects.count() == 1

    def test_dry_run(self, make_access_token):
        """Test --dry-run only counts."""
        make_access_token(expires_in=-timedelta(days=45))
        out = StringIO()

        call_command("purge_expired_access_tokens", "--dry-run", stdout=out)

        assert CustomerAccessToken.objects.count() == 1
        assert "Found 1 access token(s)" in out.getvalue()
        assert "DRY RUN" in out.getvalue()

    def test_negative_days(self):
        """Test a negative retention period is rejected."""
        with pytest.raises(CommandError):
            call_command("purge_expired_access_tokens", "--days", "-1", stdout=StringIO())
