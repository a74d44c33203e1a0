"""
Activation domain services.

The activation rule: a node may only become active while every ancestor
is active. Deactivation is always permitted and never cascades to
descendants.
"""

import uuid
from dataclasses import dataclass
from typing import List, Optional, Sequence

from activations.domain.hierarchy import HierarchyNode
from activations.ports.hierarchy_repository import HierarchyRepository
from core.domain.exceptions import (
    ConcurrentStatusChangeError,
    DistributorNotFoundError,
    LocationNotFoundError,
    SellerNotFoundError,
)
from core.domain.value_objects import EntityKind

_NOT_FOUND = {
    EntityKind.DISTRIBUTOR: DistributorNotFoundError,
    EntityKind.LOCATION: LocationNotFoundError,
    EntityKind.SELLER: SellerNotFoundError,
}


@dataclass(frozen=True)
class ActivationDecision:
    """Result of evaluating the activation precondition."""

    permitted: bool
    blocker: Optional[HierarchyNode] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class ToggleOutcome:
    """
    Result of a toggle request.

    ``is_active`` is the state after the request: the new state when
    accepted, the unchanged state when blocked.
    """

    node: HierarchyNode
    is_active: bool
    blocker: Optional[HierarchyNode] = None
    message: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.blocker is None


class ActivationPolicy:
    """Centralized activation precondition."""

    @staticmethod
    def evaluate_activation_precondition(
        node: HierarchyNode,
        desired_active: bool,
        ancestors: Sequence[HierarchyNode],
    ) -> ActivationDecision:
        """
        Decide whether ``node`` may move to ``desired_active``.

        Args:
            node: Node being toggled
            desired_active: Requested state
            ancestors: Ancestor chain, nearest first

        Returns:
            ActivationDecision naming the nearest inactive ancestor when
            the activation is blocked
        """
        if not desired_active:
            return ActivationDecision(permitted=True)

        for ancestor in ancestors:
            if not ancestor.is_active:
                return ActivationDecision(
                    permitted=False,
                    blocker=ancestor,
                    message=(
                        f"Cannot activate {node.kind.value}: "
                        f"{ancestor.kind.value} must be active first"
                    ),
                )

        return ActivationDecision(permitted=True)


class ActivationEngine:
    """
    Domain service toggling the active flag of any hierarchy node.

    One algorithm serves all kinds; the repository resolves the node and
    its ancestors.
    """

    def __init__(self, hierarchy_repository: HierarchyRepository):
        self.hierarchy_repository = hierarchy_repository

    async def request_toggle(self, kind: EntityKind, entity_id: uuid.UUID) -> ToggleOutcome:
        """
        Flip the active flag of a node if the activation rule allows it.

        Args:
            kind: Entity kind
            entity_id: Entity UUID

        Returns:
            ToggleOutcome; a blocked outcome performs no write

        Raises:
            NotFoundError: If no entity of that kind has the ID
            ConcurrentStatusChangeError: If the flag changed since it was read
        """
        node = await self.hierarchy_repository.find_node(kind, entity_id)
        if node is None:
            raise _NOT_FOUND[kind](f"{kind.value.capitalize()} not found")

        desired_active = not node.is_active
        ancestors: List[HierarchyNode] = []
        if desired_active:
            ancestors = await self.hierarchy_repository.ancestors_of(kind, entity_id)

        decision = ActivationPolicy.evaluate_activation_precondition(
            node, desired_active, ancestors
        )
        if not decision.permitted:
            return ToggleOutcome(
                node=node,
                is_active=node.is_active,
                blocker=decision.blocker,
                message=decision.message,
            )

        written = await self.hierarchy_repository.compare_and_set_active(
            kind, entity_id, expected=node.is_active, new=desired_active
        )
        if not written:
            raise ConcurrentStatusChangeError()

        return ToggleOutcome(node=node, is_active=desired_active)
