"""
Customer domain events.
"""
import uuid
from dataclasses import dataclass

from core.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class CustomerAccessTokenRedeemed(DomainEvent):
    """Event raised on the first successful read of an access token."""

    token_id: uuid.UUID
    customer_email: str

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "aggregate_id", str(self.token_id))
