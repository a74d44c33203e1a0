"""
Access token repository port (interface).

This defines the contract for customer access token persistence.
Implementations are in the infrastructure layer.
"""
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from customers.domain.access_token import CustomerAccessToken


class AccessTokenRepository(ABC):
    """
    Abstract repository for CustomerAccessToken entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, token: CustomerAccessToken) -> CustomerAccessToken:
        """
        Save an access token entity.

        Args:
            token: CustomerAccessToken to save

        Returns:
            Saved CustomerAccessToken
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: str) -> Optional[CustomerAccessToken]:
        """
        Find an access token by its opaque value.

        Args:
            token: Token string

        Returns:
            CustomerAccessToken or None if not found
        """
        pass

    @abstractmethod
    async def mark_used(self, token_id: uuid.UUID, used_at: datetime) -> bool:
        """
        Record the first read of a token.

        The write only happens while ``used_at`` is unset, so concurrent
        first reads store a single timestamp.

        Args:
            token_id: Token UUID
            used_at: Time of the read

        Returns:
            True if this call recorded the first read
        """
        pass

    @abstractmethod
    async def delete_expired_before(self, cutoff: datetime) -> int:
        """
        Delete tokens that expired before ``cutoff``.

        Args:
            cutoff: Expiry threshold

        Returns:
            Number of deleted tokens
        """
        pass
