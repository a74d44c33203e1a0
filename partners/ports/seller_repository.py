"""
Seller repository port (interface).
"""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from accounts.domain.account import Account
from partners.domain.seller import Seller


class SellerRepository(ABC):
    """Abstract repository for Seller entities."""

    @abstractmethod
    async def save(self, seller: Seller) -> Seller:
        """
        Save a seller entity together with its configuration.

        Args:
            seller: Seller entity to save

        Returns:
            Saved seller entity
        """
        pass

    @abstractmethod
    async def save_with_account(self, seller: Seller, account: Account) -> Seller:
        """
        Save a seller and its owning account in one transaction.

        Neither row is written when either write fails.

        Returns:
            Saved seller entity
        """
        pass

    @abstractmethod
    async def find_by_id(self, seller_id: uuid.UUID) -> Optional[Seller]:
        """
        Find a seller by ID.

        Args:
            seller_id: Seller UUID

        Returns:
            Seller entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_locations(self, location_ids: List[uuid.UUID]) -> List[Seller]:
        """
        Find the sellers of several locations, ordered by name.

        Args:
            location_ids: Location UUIDs

        Returns:
            List of Seller entities
        """
        pass
