"""
Django implementation of HierarchyRepository port.

Reads and writes the active flags stored on the partner models.
"""

import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.utils import timezone

from activations.domain.hierarchy import HierarchyNode
from activations.ports.hierarchy_repository import HierarchyRepository
from core.domain.value_objects import EntityKind
from partners.infrastructure.models import Distributor, Location, Seller

_MODELS = {
    EntityKind.DISTRIBUTOR: Distributor,
    EntityKind.LOCATION: Location,
    EntityKind.SELLER: Seller,
}

# foreign key from each kind to its parent
_PARENT_FIELD = {
    EntityKind.LOCATION: "distributor",
    EntityKind.SELLER: "location",
}


def _node(kind: EntityKind, model) -> HierarchyNode:
    return HierarchyNode(kind=kind, id=model.id, name=model.name, is_active=model.is_active)


class DjangoHierarchyRepository(HierarchyRepository):
    """Django ORM implementation of HierarchyRepository."""

    async def find_node(self, kind: EntityKind, entity_id: uuid.UUID) -> Optional[HierarchyNode]:
        """
        Find a node by kind and ID.

        Args:
            kind: Entity kind
            entity_id: Entity UUID

        Returns:
            HierarchyNode or None if not found
        """
        model_class = _MODELS[kind]
        model = await sync_to_async(
            lambda: model_class.objects.filter(id=entity_id).only("id", "name", "is_active").first()
        )()
        return _node(kind, model) if model else None

    def _ancestors(self, kind: EntityKind, entity_id: uuid.UUID) -> List[HierarchyNode]:
        path = []
        level = kind
        while level.parent is not None:
            path.append(_PARENT_FIELD[level])
            level = level.parent
        if not path:
            return []

        model = (
            _MODELS[kind].objects.select_related("__".join(path))  # pylint: disable=no-member
            .filter(id=entity_id)
            .first()
        )
        if model is None:
            return []

        ancestors = []
        level = kind
        for field in path:
            model = getattr(model, field)
            level = level.parent
            ancestors.append(_node(level, model))
        return ancestors

    async def ancestors_of(self, kind: EntityKind, entity_id: uuid.UUID) -> List[HierarchyNode]:
        """
        Get the ancestor chain of a node in one query.

        Args:
            kind: Entity kind
            entity_id: Entity UUID

        Returns:
            Ancestors ordered nearest first
        """
        return await sync_to_async(self._ancestors)(kind, entity_id)

    async def compare_and_set_active(
        self, kind: EntityKind, entity_id: uuid.UUID, expected: bool, new: bool
    ) -> bool:
        """
        Conditionally write the active flag of a single row.

        Args:
            kind: Entity kind
            entity_id: Entity UUID
            expected: Flag value read before the decision
            new: Flag value to write

        Returns:
            True if exactly one row was updated
        """
        model_class = _MODELS[kind]
        updated = await sync_to_async(
            lambda: model_class.objects.filter(id=entity_id, is_active=expected).update(
                is_active=new, updated_at=timezone.now()
            )
        )()
        return updated == 1
