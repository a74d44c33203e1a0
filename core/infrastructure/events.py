"""
In-process event bus.

The service runs as a single Django process, so events never leave it.
Handlers are registered once from ``AppConfig.ready``.
"""

import asyncio
import logging
from typing import Dict, List, Type

from core.domain.events import DomainEvent, EventBus, EventHandler

logger = logging.getLogger(__name__)


class InMemoryEventBus(EventBus):
    """
    Dispatches events to handlers in the publishing coroutine.

    Handlers of one event run concurrently. Handler errors are logged and
    swallowed: a broken audit or metrics handler must not undo or fail
    the state change that produced the event.
    """

    def __init__(self):
        self._handlers: Dict[Type[DomainEvent], List[EventHandler]] = {}

    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """Register a handler; a second handler of the same class is ignored."""
        handlers = self._handlers.setdefault(event_type, [])
        if any(type(existing) is type(handler) for existing in handlers):
            return
        handlers.append(handler)
        logger.debug("Subscribed %s to %s", type(handler).__name__, event_type.__name__)

    def clear(self) -> None:
        self._handlers.clear()

    async def publish(self, event: DomainEvent) -> None:
        handlers = self._handlers.get(type(event), [])
        if not handlers:
            logger.debug("No handlers for %s", event.event_type)
            return

        await asyncio.gather(
            *(self._deliver(handler, event) for handler in handlers), return_exceptions=True
        )

    async def _deliver(self, handler: EventHandler, event: DomainEvent) -> None:
        try:
            await handler.handle(event)
        except Exception:
            logger.exception(
                "%s failed on %s %s",
                type(handler).__name__,
                event.event_type,
                event.event_id,
            )
            raise


event_bus = InMemoryEventBus()
