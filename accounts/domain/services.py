"""
Account domain services.

Password hashing is delegated to Django's configured hashers, which
are treated as a black-box collaborator.
"""

from django.contrib.auth.hashers import check_password, make_password

from accounts.domain.account import Account


class PasswordHasher:
    """Domain service wrapping the framework password hashers."""

    @staticmethod
    def hash(raw_password: str) -> str:
        """
        Hash a raw password.

        Args:
            raw_password: Password as typed by the user

        Returns:
            Encoded password hash
        """
        if not raw_password:
            raise ValueError("Password cannot be empty")
        return make_password(raw_password)

    @staticmethod
    def verify(account: Account, raw_password: str) -> bool:
        """
        Check a raw password against an account's stored hash.

        Args:
            account: Account entity
            raw_password: Password to verify

        Returns:
            True if the password matches
        """
        if not raw_password:
            return False
        return check_password(raw_password, account.password_hash)
