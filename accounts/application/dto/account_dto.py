"""
Account DTOs for API responses.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class AccountDTO:
    """DTO for the authenticated account."""

    id: uuid.UUID
    name: str
    email: str
    role: str


@dataclass
class AccountSummaryDTO:
    """DTO for the owning account of a partner record."""

    id: uuid.UUID
    name: str
    email: str
    role: str
    is_active: bool
    created_at: Optional[datetime]
