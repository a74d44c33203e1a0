"""
Location repository port (interface).
"""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from accounts.domain.account import Account
from partners.domain.location import Location


class LocationRepository(ABC):
    """Abstract repository for Location entities."""

    @abstractmethod
    async def save(self, location: Location) -> Location:
        """
        Save a location entity.

        The active flag is written on creation only.

        Args:
            location: Location entity to save

        Returns:
            Saved location entity
        """
        pass

    @abstractmethod
    async def save_with_account(self, location: Location, account: Account) -> Location:
        """
        Save a location and its owning account in one transaction.

        Neither row is written when either write fails.

        Returns:
            Saved location entity
        """
        pass

    @abstractmethod
    async def find_by_id(self, location_id: uuid.UUID) -> Optional[Location]:
        """
        Find a location by ID.

        Args:
            location_id: Location UUID

        Returns:
            Location entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_distributor(self, distributor_id: uuid.UUID) -> List[Location]:
        """
        Find the locations of a distributor ordered by name.

        Args:
            distributor_id: Distributor UUID

        Returns:
            List of Location entities
        """
        pass
