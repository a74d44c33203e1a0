"""
Account repository port (interface).

This defines the contract for account persistence operations.
Implementations are in the infrastructure layer.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from accounts.domain.account import Account


class AccountRepository(ABC):
    """
    Abstract repository for Account entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """
        Save an account entity.

        Args:
            account: Account entity to save

        Returns:
            Saved account entity
        """
        pass

    @abstractmethod
    async def find_by_id(self, account_id: uuid.UUID) -> Optional[Account]:
        """
        Find an account by ID.

        Args:
            account_id: Account UUID

        Returns:
            Account entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Account]:
        """
        Find an account by email (case-insensitive).

        Args:
            email: Login email

        Returns:
            Account entity or None if not found
        """
        pass

    @abstractmethod
    async def email_in_use(self, email: str, exclude_id: Optional[uuid.UUID] = None) -> bool:
        """
        Check whether an email belongs to an account.

        Args:
            email: Login email
            exclude_id: Account to ignore (for updates)

        Returns:
            True if another account already uses the email
        """
        pass

    @abstractmethod
    async def find_by_ids(self, account_ids: List[uuid.UUID]) -> Dict[uuid.UUID, Account]:
        """
        Find several accounts at once.

        Args:
            account_ids: Account UUIDs

        Returns:
            Mapping of account ID to Account entity (unknown IDs omitted)
        """
        pass
