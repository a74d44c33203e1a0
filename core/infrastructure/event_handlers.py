"""
Event handlers for domain events.

These handlers process domain events asynchronously for side effects
like audit logging and metrics.
"""

import logging

from activations.domain.events import EntityActivationBlocked, EntityStatusToggled
from core.domain.events import DomainEvent, EventHandler
from customers.domain.events import CustomerAccessTokenRedeemed

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("audit")


class AuditLogEventHandler(EventHandler):
    """Writes one structured line per event to the ``audit`` logger."""

    async def handle(self, event: DomainEvent) -> None:
        record = event.to_dict()
        audit_logger.info(
            "%s %s",
            event.event_type,
            event.aggregate_id,
            extra={
                "event_id": record["event_id"],
                "event_type": record["event_type"],
                "aggregate_id": record["aggregate_id"],
                "occurred_at": record["occurred_at"],
                "payload": record["payload"],
            },
        )


class MetricsEventHandler(EventHandler):
    """Event handler updating the business Prometheus counters."""

    async def handle(self, event: DomainEvent) -> None:
        """
        Handle domain event for metrics.

        Args:
            event: Domain event
        """
        from core.metrics import (
            access_tokens_redeemed_total,
            activations_blocked_total,
            status_toggles_total,
        )

        if isinstance(event, EntityStatusToggled):
            status_toggles_total.labels(
                entity_kind=event.entity_kind,
                new_state="active" if event.is_active else "inactive",
            ).inc()
        elif isinstance(event, EntityActivationBlocked):
            activations_blocked_total.labels(
                entity_kind=event.entity_kind,
                blocker_kind=event.blocker_kind,
            ).inc()
        elif isinstance(event, CustomerAccessTokenRedeemed):
            access_tokens_redeemed_total.inc()


# Register event handlers
def register_event_handlers():
    """Register all event handlers with the event bus."""
    from core.infrastructure.events import event_bus

    audit_handler = AuditLogEventHandler()
    metrics_handler = MetricsEventHandler()

    for event_type in (EntityStatusToggled, EntityActivationBlocked, CustomerAccessTokenRedeemed):
        event_bus.subscribe(event_type, audit_handler)
        event_bus.subscribe(event_type, metrics_handler)

    logger.info("Event handlers registered")
