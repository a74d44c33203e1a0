"""
Unit tests for core value objects.
"""
import pytest

from core.domain.value_objects import EntityKind, Email, UserRole


class TestEmail:
    """Tests for Email value object."""

    def test_valid_email(self):
        """Test valid email creation."""
        email = Email("test@example.com")
        assert str(email) == "test@example.com"
        assert email.value == "test@example.com"

    def test_email_normalized(self):
        """Test emails are trimmed and lower-cased."""
        assert Email("  Seller@RiuCancun.COM ") == Email("seller@riucancun.com")

    def test_invalid_email_no_at(self):
        """Test invalid email without @."""
        with pytest.raises(ValueError, match="Invalid email"):
            Email("invalid-email")

    def test_invalid_email_empty(self):
        """Test invalid empty email."""
        with pytest.raises(ValueError, match="Invalid email"):
            Email("")

    def test_hashable(self):
        """Test equal emails hash equally."""
        assert len({Email("a@example.com"), Email("A@example.com")}) == 1


class TestEntityKind:
    """Tests for EntityKind."""

    def test_parents(self):
        """Test the hierarchy levels."""
        assert EntityKind.DISTRIBUTOR.parent is None
        assert EntityKind.LOCATION.parent == EntityKind.DISTRIBUTOR
        assert EntityKind.SELLER.parent == EntityKind.LOCATION

    def test_str(self):
        """Test kinds render as their value."""
        assert str(EntityKind.SELLER) == "seller"


class TestUserRole:
    """Tests for UserRole."""

    def test_values(self):
        """Test role values match the stored claims."""
        assert [r.value for r in UserRole] == ["ADMIN", "DISTRIBUTOR", "LOCATION", "SELLER"]
        assert UserRole("ADMIN") is UserRole.ADMIN
