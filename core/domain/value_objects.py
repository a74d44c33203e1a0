"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
from abc import ABC
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.

    Value objects are immutable and compared by value.
    """

    def __eq__(self, other):
        """Compare value objects by their attributes."""
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self):
        """Make value objects hashable."""
        return hash(tuple(sorted(self.__dict__.items())))


@dataclass(frozen=True)
class Email(ValueObject):
    """Email value object with validation."""

    value: str

    def __post_init__(self):
        """Validate and normalize email format."""
        if not self.value or "@" not in self.value:
            raise ValueError(f"Invalid email address: {self.value}")
        object.__setattr__(self, "value", self.value.strip().lower())

    def __str__(self) -> str:
        """Return email as string."""
        return self.value


class UserRole(Enum):
    """Role claim carried by every account."""

    ADMIN = "ADMIN"
    DISTRIBUTOR = "DISTRIBUTOR"
    LOCATION = "LOCATION"
    SELLER = "SELLER"

    def __str__(self) -> str:
        """Return role as string."""
        return self.value


class EntityKind(Enum):
    """
    Levels of the partner hierarchy.

    Distributors own locations, locations own sellers.
    """

    DISTRIBUTOR = "distributor"
    LOCATION = "location"
    SELLER = "seller"

    def __str__(self) -> str:
        """Return kind as string."""
        return self.value

    @property
    def parent(self):
        """Kind of the owning node, or None for the root."""
        return {
            EntityKind.DISTRIBUTOR: None,
            EntityKind.LOCATION: EntityKind.DISTRIBUTOR,
            EntityKind.SELLER: EntityKind.LOCATION,
        }[self]


class SendMethod(Enum):
    """How a seller delivers QR codes to customers."""

    URL = "URL"
    APP = "APP"

    def __str__(self) -> str:
        return self.value


class PricingType(Enum):
    """Seller pricing mode."""

    FIXED = "FIXED"
    VARIABLE = "VARIABLE"
    FREE = "FREE"

    def __str__(self) -> str:
        return self.value
