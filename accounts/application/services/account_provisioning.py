"""
Account provisioning service.

Creates and edits the accounts owned by distributors, locations and
sellers. Email addresses are unique across all accounts.
"""

import logging
import uuid
from typing import Optional

from accounts.application.dto.account_dto import AccountSummaryDTO
from accounts.domain.account import Account
from accounts.domain.services import PasswordHasher
from accounts.ports.account_repository import AccountRepository
from core.domain.exceptions import AccountNotFoundError, DuplicateEmailError, ValidationError
from core.domain.value_objects import UserRole

logger = logging.getLogger(__name__)


def account_summary(account: Optional[Account]) -> Optional[AccountSummaryDTO]:
    """Build the account summary embedded in partner responses."""
    if account is None:
        return None
    return AccountSummaryDTO(
        id=account.id,
        name=account.name,
        email=str(account.email),
        role=account.role.value,
        is_active=account.is_active,
        created_at=account.created_at,
    )


class AccountProvisioningService:
    """Application service for partner-owned accounts."""

    def __init__(self, account_repository: AccountRepository):
        self.account_repository = account_repository

    async def new_account(self, name: str, email: str, password: str, role: UserRole) -> Account:
        """
        Build a new active account without storing it.

        Partner repositories store it together with the partner row.

        Args:
            name: Display name
            email: Login email
            password: Raw password
            role: Role claim

        Returns:
            Unsaved Account entity

        Raises:
            ValidationError: If the email or password is missing or malformed
            DuplicateEmailError: If the email is already used
        """
        if not password:
            raise ValidationError("Password is required")
        if not email:
            raise ValidationError("Email is required")
        if await self.account_repository.email_in_use(email):
            raise DuplicateEmailError(f"Email {email.strip().lower()} is already in use")

        try:
            account = Account.create(
                name=name,
                email=email,
                password_hash=PasswordHasher.hash(password),
                role=role,
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e
        return account

    async def create_account(self, name: str, email: str, password: str, role: UserRole) -> Account:
        """Build and store a new active account."""
        saved = await self.account_repository.save(
            await self.new_account(name, email, password, role)
        )
        logger.info("Created %s account %s", role.value, saved.id)
        return saved

    async def edit_account(
        self,
        account_id: uuid.UUID,
        name: str,
        email: str,
        password: Optional[str] = None,
    ) -> Account:
        """
        Apply a name, email and (optionally) password change without storing it.

        An empty password leaves the stored hash unchanged.

        Raises:
            AccountNotFoundError: If the account does not exist
            DuplicateEmailError: If the new email belongs to another account
        """
        account = await self.account_repository.find_by_id(account_id)
        if not account:
            raise AccountNotFoundError(f"Account {account_id} not found")

        try:
            if email and email.strip().lower() != str(account.email):
                if await self.account_repository.email_in_use(email, exclude_id=account.id):
                    raise DuplicateEmailError(
                        f"Email {email.strip().lower()} is already in use"
                    )
                account = account.with_email(email)
            if name:
                account = account.with_name(name)
            if password:
                account = account.with_password_hash(PasswordHasher.hash(password))
                logger.info("Password changed for account %s", account.id)
        except ValueError as e:
            raise ValidationError(str(e)) from e
        return account

    async def update_account(
        self,
        account_id: uuid.UUID,
        name: str,
        email: str,
        password: Optional[str] = None,
    ) -> Account:
        """Edit an account and store the change."""
        return await self.account_repository.save(
            await self.edit_account(account_id, name=name, email=email, password=password)
        )
