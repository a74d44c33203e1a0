"""
Domain event primitives.

Events describe state changes that already happened (a node toggled, an
activation refused, a token redeemed). Side effects such as the audit
log and business counters subscribe to them instead of being called
from the handlers directly.
"""

import enum
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from datetime import datetime, timezone
from typing import Any, Dict, Optional

_ENVELOPE = ("event_id", "occurred_at", "aggregate_id", "event_type")


def _plain(value: Any) -> Any:
    if isinstance(value, (uuid.UUID, datetime)):
        return value.isoformat() if isinstance(value, datetime) else str(value)
    if isinstance(value, enum.Enum):
        return value.value
    return value


@dataclass(frozen=True)
class DomainEvent(ABC):
    """
    Immutable record of something that happened.

    The envelope fields are filled in on construction. Concrete events are
    frozen ``kw_only`` dataclasses that add payload fields and set
    ``aggregate_id`` to the ID of the entity they concern.
    """

    event_id: Optional[uuid.UUID] = None
    occurred_at: Optional[datetime] = None
    aggregate_id: str = ""
    event_type: str = ""

    def __post_init__(self):
        object.__setattr__(self, "event_id", self.event_id or uuid.uuid4())
        object.__setattr__(self, "occurred_at", self.occurred_at or datetime.now(timezone.utc))
        object.__setattr__(self, "event_type", self.event_type or type(self).__name__)

    @property
    def payload(self) -> Dict[str, Any]:
        """Event-specific fields as JSON-friendly values."""
        return {
            f.name: _plain(getattr(self, f.name)) for f in fields(self) if f.name not in _ENVELOPE
        }

    def to_dict(self) -> Dict[str, Any]:
        """Envelope plus payload, ready for a log line or a message body."""
        return {
            "event_id": str(self.event_id),
            "occurred_at": self.occurred_at.isoformat(),
            "aggregate_id": self.aggregate_id,
            "event_type": self.event_type,
            "payload": self.payload,
        }


class EventHandler(ABC):
    """Reacts to published events."""

    @abstractmethod
    async def handle(self, event: DomainEvent) -> None:
        pass


class EventBus(ABC):
    """Port for publishing events to subscribed handlers."""

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """Deliver ``event`` to every handler subscribed to its type."""
        pass

    @abstractmethod
    def subscribe(self, event_type: type, handler: EventHandler) -> None:
        """Register ``handler`` for events of exactly ``event_type``."""
        pass
