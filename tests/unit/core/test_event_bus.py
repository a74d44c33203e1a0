"""
Unit tests for the in-memory event bus and domain events.
"""
import uuid
from dataclasses import FrozenInstanceError

import pytest

from activations.domain.events import EntityStatusToggled
from core.domain.events import EventHandler
from core.infrastructure.event_handlers import AuditLogEventHandler
from core.infrastructure.events import InMemoryEventBus


class RecordingHandler(EventHandler):
    def __init__(self):
        self.events = []

    async def handle(self, event):
        self.events.append(event)


class FailingHandler(EventHandler):
    async def handle(self, event):
        raise RuntimeError("boom")


def toggled():
    return EntityStatusToggled(entity_kind="seller", entity_id=uuid.uuid4(), is_active=True)


class TestDomainEvent:
    """Tests for domain event defaults."""

    def test_defaults(self):
        """Test ids, timestamps and type are filled in."""
        event = toggled()

        assert event.event_id is not None
        assert event.occurred_at is not None
        assert event.event_type == "EntityStatusToggled"
        assert event.aggregate_id == str(event.entity_id)
        assert event.to_dict()["event_type"] == "EntityStatusToggled"
        assert event.to_dict()["payload"] == {
            "entity_kind": "seller",
            "entity_id": str(event.entity_id),
            "is_active": True,
        }

    def test_frozen(self):
        """Test events are immutable."""
        event = toggled()

        with pytest.raises(FrozenInstanceError):
            event.is_active = False


@pytest.mark.asyncio
class TestInMemoryEventBus:
    """Tests for InMemoryEventBus."""

    async def test_publish_to_subscribers(self):
        """Test subscribers receive published events."""
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(EntityStatusToggled, handler)
        event = toggled()

        await bus.publish(event)

        assert handler.events == [event]

    async def test_subscribe_is_idempotent_per_handler_type(self):
        """Test registering the same handler type twice delivers once."""
        bus = InMemoryEventBus()
        first, second = RecordingHandler(), RecordingHandler()
        bus.subscribe(EntityStatusToggled, first)
        bus.subscribe(EntityStatusToggled, second)

        await bus.publish(toggled())

        assert len(first.events) == 1
        assert second.events == []

    async def test_failing_handler_is_isolated(self):
        """Test a failing handler affects neither publisher nor other handlers."""
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(EntityStatusToggled, FailingHandler())
        bus.subscribe(EntityStatusToggled, handler)

        await bus.publish(toggled())

        assert len(handler.events) == 1

    async def test_publish_without_subscribers(self):
        """Test publishing with no subscribers is a no-op."""
        await InMemoryEventBus().publish(toggled())

    async def test_clear(self):
        """Test clear removes subscriptions."""
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(EntityStatusToggled, handler)
        bus.clear()

        await bus.publish(toggled())

        assert handler.events == []

    async def test_audit_handler_logs(self, caplog):
        """Test the audit handler writes one line per event."""
        event = toggled()

        with caplog.at_level("INFO", logger="audit"):
            await AuditLogEventHandler().handle(event)

        assert any(event.aggregate_id in record.getMessage() for record in caplog.records)
