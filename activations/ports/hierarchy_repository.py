"""
Hierarchy repository port (interface).

This defines the contract the activation engine needs from the
identity store. Implementations are in the infrastructure layer.
"""
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from activations.domain.hierarchy import HierarchyNode
from core.domain.value_objects import EntityKind


class HierarchyRepository(ABC):
    """
    Abstract repository over the partner hierarchy.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def find_node(self, kind: EntityKind, entity_id: uuid.UUID) -> Optional[HierarchyNode]:
        """
        Find a node by kind and ID.

        Returns:
            HierarchyNode or None if not found
        """
        pass

    @abstractmethod
    async def ancestors_of(self, kind: EntityKind, entity_id: uuid.UUID) -> List[HierarchyNode]:
        """
        Get the ancestor chain of a node.

        Returns:
            Ancestors ordered nearest first (empty for distributors)
        """
        pass

    @abstractmethod
    async def compare_and_set_active(
        self, kind: EntityKind, entity_id: uuid.UUID, expected: bool, new: bool
    ) -> bool:
        """
        Set the active flag only if it still equals ``expected``.

        Returns:
            True if the row was written, False if the flag had changed
        """
        pass
