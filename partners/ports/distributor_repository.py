"""
Distributor repository port (interface).

This defines the contract for distributor persistence operations.
Implementations are in the infrastructure layer.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from accounts.domain.account import Account
from partners.domain.distributor import Distributor


class DistributorRepository(ABC):
    """
    Abstract repository for Distributor entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, distributor: Distributor) -> Distributor:
        """
        Save a distributor entity.

        The active flag is written on creation only; later changes go
        through the activation engine's conditional update.

        Args:
            distributor: Distributor entity to save

        Returns:
            Saved distributor entity
        """
        pass

    @abstractmethod
    async def save_with_account(self, distributor: Distributor, account: Account) -> Distributor:
        """
        Save a distributor and its owning account in one transaction.

        Neither row is written when either write fails.

        Returns:
            Saved distributor entity
        """
        pass

    @abstractmethod
    async def find_by_id(self, distributor_id: uuid.UUID) -> Optional[Distributor]:
        """
        Find a distributor by ID.

        Args:
            distributor_id: Distributor UUID

        Returns:
            Distributor entity or None if not found
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Distributor]:
        """
        Find all distributors ordered by name.

        Returns:
            List of Distributor entities
        """
        pass

    @abstractmethod
    async def location_counts(self) -> Dict[uuid.UUID, int]:
        """
        Count locations per distributor.

        Returns:
            Mapping of distributor ID to number of locations
        """
        pass
