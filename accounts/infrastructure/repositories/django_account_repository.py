"""
Django implementation of AccountRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import uuid
from typing import Dict, List, Optional

from asgiref.sync import sync_to_async

from accounts.domain.account import Account
from accounts.infrastructure.models import UserAccount as UserAccountModel
from accounts.ports.account_repository import AccountRepository
from core.domain.value_objects import Email, UserRole


def account_to_domain(model: UserAccountModel) -> Account:
    """
    Convert Django model to domain entity.

    Shared with the partner repositories, which load owning accounts
    through ``select_related``.
    """
    return Account(
        id=model.id,
        name=model.name,
        email=Email(model.email),
        password_hash=model.password,
        role=UserRole(model.role),
        is_active=model.is_active,
        created_at=model.created_at,
    )


def save_account_model(account: Account) -> UserAccountModel:
    """
    Insert or update the row of an account.

    Synchronous so partner repositories can call it inside their own
    transaction.
    """
    # pylint: disable=no-member
    model, _ = UserAccountModel.objects.update_or_create(
        id=account.id,
        defaults={
            "name": account.name,
            "email": str(account.email),
            "password": account.password_hash,
            "role": account.role.value,
            "is_active": account.is_active,
        },
    )
    return model


class DjangoAccountRepository(AccountRepository):
    """Django ORM implementation of AccountRepository."""

    async def save(self, account: Account) -> Account:
        """
        Save an account entity.

        Args:
            account: Account entity to save

        Returns:
            Saved account entity
        """
        model = await sync_to_async(save_account_model)(account)
        return account_to_domain(model)

    async def find_by_id(self, account_id: uuid.UUID) -> Optional[Account]:
        """
        Find an account by ID.

        Args:
            account_id: Account UUID

        Returns:
            Account entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = await sync_to_async(UserAccountModel.objects.get)(id=account_id)
            return account_to_domain(model)
        except UserAccountModel.DoesNotExist:  # pylint: disable=no-member
            return None

    async def find_by_email(self, email: str) -> Optional[Account]:
        """
        Find an account by email (case-insensitive).

        Args:
            email: Login email

        Returns:
            Account entity or None if not found
        """
        model = await sync_to_async(
            lambda: UserAccountModel.objects.filter(  # pylint: disable=no-member
                email=email.strip().lower()
            ).first()
        )()
        return account_to_domain(model) if model else None

    async def email_in_use(self, email: str, exclude_id: Optional[uuid.UUID] = None) -> bool:
        """
        Check whether an email belongs to an account.

        Args:
            email: Login email
            exclude_id: Account to ignore (for updates)

        Returns:
            True if another account already uses the email
        """

        def _exists():
            queryset = UserAccountModel.objects.filter(  # pylint: disable=no-member
                email=email.strip().lower()
            )
            if exclude_id:
                queryset = queryset.exclude(id=exclude_id)
            return queryset.exists()

        return await sync_to_async(_exists)()

    async def find_by_ids(self, account_ids: List[uuid.UUID]) -> Dict[uuid.UUID, Account]:
        """
        Find several accounts at once.

        Args:
            account_ids: Account UUIDs

        Returns:
            Mapping of account ID to Account entity (unknown IDs omitted)
        """
        models = await sync_to_async(
            lambda: list(
                UserAccountModel.objects.filter(id__in=list(account_ids))  # pylint: disable=no-member
            )
        )()
        return {model.id: account_to_domain(model) for model in models}
