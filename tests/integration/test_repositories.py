"""
Integration tests for repository implementations.

Async repository methods are driven through ``async_to_sync`` so the ORM
runs on the test thread, inside the test transaction.
"""
import uuid
from datetime import timedelta
from decimal import Decimal
from unittest import mock

import pytest
from asgiref.sync import async_to_sync
from django.contrib.auth.hashers import check_password
from django.db import DatabaseError
from django.utils import timezone

from accounts.domain.account import Account
from accounts.infrastructure.models import UserAccount as UserAccountModel
from core.domain.value_objects import EntityKind, PricingType, SendMethod, UserRole
from customers.domain.access_token import CustomerAccessToken
from customers.infrastructure.models import CustomerAccessToken as CustomerAccessTokenModel
from partners.application.commands.create_distributor import CreateDistributorCommand
from partners.application.commands.update_location import UpdateLocationCommand
from partners.application.handlers.distributor_handlers import CreateDistributorHandler
from partners.application.handlers.location_handlers import UpdateLocationHandler
from partners.domain.distributor import ContactDetails, Distributor
from partners.domain.seller import Seller, SellerConfig
from partners.infrastructure.models import Distributor as DistributorModel
from partners.infrastructure.models import Location as LocationModel


@pytest.mark.django_db
@pytest.mark.integration
class TestAccountRepository:
    """Integration tests for AccountRepository."""

    def test_save_and_find(self, account_repository):
        """Test saving and finding an account."""
        account = Account.create(
            name="Admin", email="Admin@Example.com", password_hash="hashed", role=UserRole.ADMIN,
        )

        async_to_sync(account_repository.save)(account)

        by_id = async_to_sync(account_repository.find_by_id)(account.id)
        by_email = async_to_sync(account_repository.find_by_email)("ADMIN@example.com ")
        assert by_id.email == account.email
        assert by_email.id == account.id
        assert async_to_sync(account_repository.email_in_use)("admin@example.com") is True
        assert async_to_sync(account_repository.email_in_use)(
            "admin@example.com", exclude_id=account.id
        ) is False

    def test_find_missing(self, account_repository):
        """Test finding non-existent accounts."""
        assert async_to_sync(account_repository.find_by_id)(uuid.uuid4()) is None
        assert async_to_sync(account_repository.find_by_email)("ghost@example.com") is None


@pytest.mark.django_db
@pytest.mark.integration
class TestPartnerRepositories:
    """Integration tests for the partner repositories."""

    def test_distributor_save_keeps_active_flag(self, distributor_repository, make_account):
        """Test saving an edited distributor never writes the active flag."""
        account = make_account("DISTRIBUTOR")
        distributor = Distributor.create(name="Riu Hotels", account_id=account.id)
        async_to_sync(distributor_repository.save)(distributor)
        DistributorModel.objects.filter(id=distributor.id).update(is_active=False)
        edited = distributor.update_details(contact=ContactDetails(notes="VIP"))

        saved = async_to_sync(distributor_repository.save)(edited)

        assert saved.is_active is False
        assert saved.contact.notes == "VIP"

    def test_location_counts(self, distributor_repository, make_chain):
        """Test locations are counted per distributor."""
        chain = make_chain()

        counts = async_to_sync(distributor_repository.location_counts)()

        assert counts[chain["distributor"].id] == 1

    def test_location_find_by_distributor(self, location_repository, make_chain):
        """Test locations are found by distributor."""
        chain = make_chain()

        locations = async_to_sync(location_repository.find_by_distributor)(chain["distributor"].id)

        assert [loc.id for loc in locations] == [chain["location"].id]

    def test_seller_save_with_config(self, seller_repository, make_chain, make_account):
        """Test sellers are stored with their configuration."""
        chain = make_chain()
        account = make_account("SELLER")
        seller = Seller.create(
            location_id=chain["location"].id,
            name="Pedrita Gomez",
            account_id=account.id,
            config=SellerConfig(
                send_method=SendMethod.APP,
                pricing_type=PricingType.FREE,
                fixed_price=Decimal("10.50"),
            ),
        )

        async_to_sync(seller_repository.save)(seller)
        found = async_to_sync(seller_repository.find_by_id)(seller.id)

        assert found.config.send_method == SendMethod.APP
        assert found.config.pricing_type == PricingType.FREE
        assert found.config.fixed_price == Decimal("10.50")
        sellers = async_to_sync(seller_repository.find_by_locations)([chain["location"].id])
        assert [s.name for s in sellers] == sorted([chain["seller"].name, "Pedrita Gomez"])

    def test_distributor_saved_with_account(self, distributor_repository):
        """Test a new distributor and its account are stored together."""
        account = Account.create(
            name="Riu Hotels", email="d@riu.com", password_hash="hashed", role=UserRole.DISTRIBUTOR,
        )
        distributor = Distributor.create(name="Riu Hotels", account_id=account.id)

        saved = async_to_sync(distributor_repository.save_with_account)(distributor, account)

        assert saved.account_id == account.id
        assert UserAccountModel.objects.filter(id=account.id, email="d@riu.com").exists()

    def test_failed_distributor_write_leaves_no_account(
        self, distributor_repository, account_repository
    ):
        """Test a failing distributor insert rolls back its new account."""
        handler = CreateDistributorHandler(distributor_repository, account_repository)
        command = CreateDistributorCommand(name="Riu Hotels", email="d@riu.com", password="secret123")

        with mock.patch.object(
            DistributorModel.objects, "get_or_create", side_effect=DatabaseError("disk full")
        ):
            with pytest.raises(DatabaseError):
                async_to_sync(handler.handle)(command)

        assert not UserAccountModel.objects.filter(email="d@riu.com").exists()
        assert not DistributorModel.objects.filter(name="Riu Hotels").exists()

        # the email is still free for a retry
        dto = async_to_sync(handler.handle)(command)
        assert DistributorModel.objects.filter(id=dto.id).exists()

    def test_failed_location_edit_keeps_account(
        self, location_repository, account_repository, make_chain
    ):
        """Test a failing location update leaves its account unchanged."""
        location = make_chain()["location"]
        old_email = location.user.email
        handler = UpdateLocationHandler(location_repository, account_repository)
        command = UpdateLocationCommand(
            location_id=location.id, name="Renamed", email="renamed@riu.com", password="newpass123"
        )

        with mock.patch.object(
            LocationModel.objects, "get_or_create", side_effect=DatabaseError("disk full")
        ):
            with pytest.raises(DatabaseError):
                async_to_sync(handler.handle)(command)

        account = UserAccountModel.objects.get(id=location.user_id)
        assert account.email == old_email
        assert check_password("secret123", account.password)


@pytest.mark.django_db
@pytest.mark.integration
class TestHierarchyRepository:
    """Integration tests for HierarchyRepository."""

    def test_find_node(self, hierarchy_repository, make_chain):
        """Test nodes are resolved per kind."""
        chain = make_chain(location_active=False)

        node = async_to_sync(hierarchy_repository.find_node)(EntityKind.LOCATION, chain["location"].id)

        assert node.kind == EntityKind.LOCATION
        assert node.is_active is False
        assert async_to_sync(hierarchy_repository.find_node)(
            EntityKind.SELLER, chain["location"].id
        ) is None

    def test_ancestors_nearest_first(self, hierarchy_repository, make_chain):
        """Test ancestors are ordered nearest first."""
        chain = make_chain()

        seller_ancestors = async_to_sync(hierarchy_repository.ancestors_of)(
            EntityKind.SELLER, chain["seller"].id
        )
        location_ancestors = async_to_sync(hierarchy_repository.ancestors_of)(
            EntityKind.LOCATION, chain["location"].id
        )
        distributor_ancestors = async_to_sync(hierarchy_repository.ancestors_of)(
            EntityKind.DISTRIBUTOR, chain["distributor"].id
        )

        assert [n.id for n in seller_ancestors] == [chain["location"].id, chain["distributor"].id]
        assert [n.name for n in seller_ancestors] == [chain["location"].name, chain["distributor"].name]
        assert [n.kind for n in seller_ancestors] == [EntityKind.LOCATION, EntityKind.DISTRIBUTOR]
        assert [n.kind for n in location_ancestors] == [EntityKind.DISTRIBUTOR]
        assert distributor_ancestors == []
        assert async_to_sync(hierarchy_repository.ancestors_of)(EntityKind.SELLER, uuid.uuid4()) == []

    def test_compare_and_set(self, hierarchy_repository, make_chain):
        """Test the conditional write only applies to the expected state."""
        chain = make_chain()
        seller = chain["seller"]
        cas = async_to_sync(hierarchy_repository.compare_and_set_active)

        assert cas(EntityKind.SELLER, seller.id, expected=True, new=False) is True
        # a second writer that read the old value loses
        assert cas(EntityKind.SELLER, seller.id, expected=True, new=False) is False
        seller.refresh_from_db()
        assert seller.is_active is False


@pytest.mark.django_db
@pytest.mark.integration
class TestCustomerRepositories:
    """Integration tests for access token and QR code repositories."""

    def test_token_save_and_find(self, access_token_repository):
        """Test saving and finding a token."""
        token = CustomerAccessToken.issue("Jane Customer", "jane@example.com")

        async_to_sync(access_token_repository.save)(token)
        found = async_to_sync(access_token_repository.find_by_token)(token.token)

        assert found.id == token.id
        assert str(found.customer_email) == "jane@example.com"
        assert async_to_sync(access_token_repository.find_by_token)("missing") is None

    def test_token_email_loaded_as_stored(self, access_token_repository, make_access_token):
        """Test the stored customer email is read back unchanged, even when malformed."""
        mixed = make_access_token(customer_email="Jane.Doe@Example.com")
        malformed = make_access_token(customer_email="front-desk")

        find = async_to_sync(access_token_repository.find_by_token)

        assert find(mixed.token).customer_email == "Jane.Doe@Example.com"
        assert find(malformed.token).customer_email == "front-desk"

    def test_mark_used_once(self, access_token_repository, make_access_token):
        """Test only the first mark_used records a timestamp."""
        token = make_access_token()
        first_time = timezone.now()
        mark_used = async_to_sync(access_token_repository.mark_used)

        assert mark_used(token.id, first_time) is True
        assert mark_used(token.id, first_time + timedelta(minutes=1)) is False
        token.refresh_from_db()
        assert token.used_at == first_time

    def test_mark_used_storage_failure(self, access_token_repository, make_access_token):
        """Test storage errors while marking are reported as not recorded."""
        token = make_access_token()

        with mock.patch.object(
            CustomerAccessTokenModel.objects, "filter", side_effect=DatabaseError("database is locked")
        ):
            result = async_to_sync(access_token_repository.mark_used)(token.id, timezone.now())

        assert result is False

    def test_delete_expired_before(self, access_token_repository, make_access_token):
        """Test purging tokens expired before a cutoff."""
        old = make_access_token(expires_in=-timedelta(days=40))
        recent = make_access_token(expires_in=-timedelta(days=1))
        live = make_access_token()

        deleted = async_to_sync(access_token_repository.delete_expired_before)(
            timezone.now() - timedelta(days=30)
        )

        assert deleted == 1
        remaining = set(CustomerAccessTokenModel.objects.values_list("id", flat=True))
        assert remaining == {recent.id, live.id}
        assert old.id not in remaining

    def test_qr_codes_by_email(self, qr_code_repository, make_chain, make_qr_code):
        """Test QR codes are matched case-insensitively, newest first."""
        seller = make_chain()["seller"]
        now = timezone.now()
        make_qr_code(seller, customer_email="Jane@Example.com", code="OLD",
                     created_at=now - timedelta(days=2))
        make_qr_code(seller, customer_email="jane@example.com", code="NEW",
                     created_at=now - timedelta(hours=2))
        make_qr_code(seller, customer_email="other@example.com", code="OTHER")

        qr_codes = async_to_sync(qr_code_repository.find_by_customer_email)("jane@example.com")

        assert [qr.code for qr in qr_codes] == ["NEW", "OLD"]
