"""
ToggleStatusHandler.

Handler for toggling the status of a hierarchy node.
"""

import logging

from activations.application.commands.toggle_status import ToggleStatusCommand
from activations.application.dto.toggle_status_dto import ToggleStatusResultDTO
from activations.domain.events import EntityActivationBlocked, EntityStatusToggled
from activations.domain.services import ActivationEngine
from activations.ports.hierarchy_repository import HierarchyRepository
from core.infrastructure.events import event_bus

logger = logging.getLogger(__name__)


class ToggleStatusHandler:
    """Handler for ToggleStatusCommand."""

    def __init__(self, hierarchy_repository: HierarchyRepository):
        """Initialize handler with repositories."""
        self.engine = ActivationEngine(hierarchy_repository)

    async def handle(self, command: ToggleStatusCommand) -> ToggleStatusResultDTO:
        """
        Handle toggle status command.

        Args:
            command: ToggleStatusCommand

        Returns:
            ToggleStatusResultDTO; ``accepted`` is False when an inactive
            ancestor blocked the activation

        Raises:
            NotFoundError: If the entity does not exist
            ConcurrentStatusChangeError: If the status changed concurrently
        """
        kind = command.entity_kind
        outcome = await self.engine.request_toggle(kind, command.entity_id)

        if not outcome.accepted:
            blocker = outcome.blocker
            logger.info(
                "Activation of %s %s blocked by inactive %s %s (%s)",
                kind.value,
                command.entity_id,
                blocker.kind.value,
                blocker.id,
                blocker.name,
            )
            await event_bus.publish(
                EntityActivationBlocked(
                    entity_kind=kind.value,
                    entity_id=command.entity_id,
                    blocker_kind=blocker.kind.value,
                    blocker_id=blocker.id,
                )
            )
            return ToggleStatusResultDTO(
                entity_kind=kind.value,
                entity_id=command.entity_id,
                is_active=outcome.is_active,
                accepted=False,
                blocker_kind=blocker.kind.value,
                blocker_id=blocker.id,
                message=outcome.message,
            )

        logger.info(
            "%s %s is now %s",
            kind.value.capitalize(),
            command.entity_id,
            "active" if outcome.is_active else "inactive",
        )
        await event_bus.publish(
            EntityStatusToggled(
                entity_kind=kind.value,
                entity_id=command.entity_id,
                is_active=outcome.is_active,
            )
        )
        return ToggleStatusResultDTO(
            entity_kind=kind.value,
            entity_id=command.entity_id,
            is_active=outcome.is_active,
            accepted=True,
        )
