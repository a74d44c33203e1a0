"""
Unit tests for LoginHandler.
"""
from dataclasses import replace

import pytest

from accounts.application.commands.login import LoginCommand
from accounts.application.handlers.login_handler import LoginHandler
from accounts.domain.account import Account
from accounts.domain.services import PasswordHasher
from core.domain.exceptions import InvalidCredentialsError
from core.domain.value_objects import UserRole


@pytest.fixture
def seller_account(account_store):
    account = Account.create(
        name="Pedrita Gomez",
        email="seller@riucancun.com",
        password_hash=PasswordHasher.hash("pedrita123"),
        role=UserRole.SELLER,
    )
    account_store.accounts[account.id] = account
    return account


@pytest.mark.asyncio
class TestLoginHandler:
    """Tests for LoginHandler."""

    async def test_login_success(self, account_store, seller_account):
        """Test valid credentials return the account."""
        handler = LoginHandler(account_repository=account_store)

        result = await handler.handle(
            LoginCommand(email="Seller@RiuCancun.com ", password="pedrita123")
        )

        assert result.id == seller_account.id
        assert result.email == "seller@riucancun.com"
        assert result.role == "SELLER"
        assert result.name == "Pedrita Gomez"

    async def test_wrong_password(self, account_store, seller_account):
        """Test a wrong password is rejected."""
        handler = LoginHandler(account_repository=account_store)

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await handler.handle(LoginCommand(email="seller@riucancun.com", password="nope"))

        assert exc_info.value.message == "Invalid email or password"

    async def test_unknown_email(self, account_store):
        """Test an unknown email gets the same error as a wrong password."""
        handler = LoginHandler(account_repository=account_store)

        with pytest.raises(InvalidCredentialsError):
            await handler.handle(LoginCommand(email="ghost@example.com", password="pedrita123"))

    async def test_inactive_account(self, account_store, seller_account):
        """Test inactive accounts cannot sign in."""
        account_store.accounts[seller_account.id] = replace(seller_account, is_active=False)
        handler = LoginHandler(account_repository=account_store)

        with pytest.raises(InvalidCredentialsError):
            await handler.handle(LoginCommand(email="seller@riucancun.com", password="pedrita123"))


class TestPasswordHasher:
    """Tests for PasswordHasher."""

    def test_hash_and_verify(self):
        """Test a hashed password verifies."""
        account = Account.create(
            name="Admin",
            email="admin@example.com",
            password_hash=PasswordHasher.hash("admin123"),
            role=UserRole.ADMIN,
        )

        assert account.password_hash != "admin123"
        assert PasswordHasher.verify(account, "admin123") is True
        assert PasswordHasher.verify(account, "admin124") is False
        assert PasswordHasher.verify(account, "") is False

    def test_empty_password_rejected(self):
        """Test an empty password cannot be hashed."""
        with pytest.raises(ValueError, match="Password cannot be empty"):
            PasswordHasher.hash("")
