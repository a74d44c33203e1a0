"""
Unit tests for ActivationEngine.
"""
import uuid

import pytest

from activations.domain.services import ActivationEngine
from core.domain.exceptions import (
    ConcurrentStatusChangeError,
    DistributorNotFoundError,
    LocationNotFoundError,
    SellerNotFoundError,
)
from core.domain.value_objects import EntityKind


def build_chain(hierarchy, distributor_active, location_active, seller_active):
    distributor = hierarchy.add(EntityKind.DISTRIBUTOR, distributor_active, name="D1")
    location = hierarchy.add(EntityKind.LOCATION, location_active, parent=distributor, name="L1")
    seller = hierarchy.add(EntityKind.SELLER, seller_active, parent=location, name="S1")
    return distributor, location, seller


@pytest.mark.asyncio
class TestActivationEngine:
    """Tests for ActivationEngine.request_toggle."""

    async def test_toggle_twice_restores_state(self, hierarchy):
        """Test a toggle followed by a toggle is the identity."""
        distributor, location, seller = build_chain(hierarchy, True, True, True)
        engine = ActivationEngine(hierarchy)

        for node in (distributor, location, seller):
            first = await engine.request_toggle(node.kind, node.id)
            second = await engine.request_toggle(node.kind, node.id)

            assert first.accepted and first.is_active is False
            assert second.accepted and second.is_active is True
            assert hierarchy.state(node) is True

    async def test_location_blocked_by_inactive_distributor(self, hierarchy):
        """Test an inactive distributor blocks location activation."""
        distributor, location, _ = build_chain(hierarchy, False, False, False)
        engine = ActivationEngine(hierarchy)

        outcome = await engine.request_toggle(EntityKind.LOCATION, location.id)

        assert outcome.accepted is False
        assert outcome.blocker.id == distributor.id
        assert outcome.is_active is False
        assert outcome.message == "Cannot activate location: distributor must be active first"
        assert hierarchy.state(location) is False
        assert hierarchy.writes == []

    async def test_seller_blocked_by_nearest_ancestor(self, hierarchy):
        """Test the location is named when both ancestors are inactive."""
        _, location, seller = build_chain(hierarchy, False, False, False)
        engine = ActivationEngine(hierarchy)

        outcome = await engine.request_toggle(EntityKind.SELLER, seller.id)

        assert outcome.accepted is False
        assert outcome.blocker.kind == EntityKind.LOCATION
        assert outcome.blocker.id == location.id
        assert outcome.message == "Cannot activate seller: location must be active first"
        assert hierarchy.state(seller) is False

    async def test_seller_blocked_by_distributor_behind_active_location(self, hierarchy):
        """Test an inactive distributor blocks a seller under an active location."""
        distributor, _, seller = build_chain(hierarchy, False, True, False)
        engine = ActivationEngine(hierarchy)

        outcome = await engine.request_toggle(EntityKind.SELLER, seller.id)

        assert outcome.accepted is False
        assert outcome.blocker.id == distributor.id
        assert outcome.message == "Cannot activate seller: distributor must be active first"
        assert hierarchy.state(seller) is False

    async def test_distributor_activation_never_blocked(self, hierarchy):
        """Test activating a distributor leaves descendants unchanged."""
        distributor, location, seller = build_chain(hierarchy, False, False, False)
        engine = ActivationEngine(hierarchy)

        outcome = await engine.request_toggle(EntityKind.DISTRIBUTOR, distributor.id)

        assert outcome.accepted is True
        assert outcome.is_active is True
        assert hierarchy.state(location) is False
        assert hierarchy.state(seller) is False

    async def test_location_deactivation_ignores_inactive_distributor(self, hierarchy):
        """Test an active location under an inactive distributor can be deactivated."""
        _, location, _ = build_chain(hierarchy, False, True, False)
        engine = ActivationEngine(hierarchy)

        outcome = await engine.request_toggle(EntityKind.LOCATION, location.id)

        assert outcome.accepted is True
        assert outcome.is_active is False
        assert hierarchy.state(location) is False

    async def test_seller_deactivation_ignores_inactive_ancestors(self, hierarchy):
        """Test an active seller under inactive ancestors can be deactivated."""
        _, _, seller = build_chain(hierarchy, False, False, True)
        engine = ActivationEngine(hierarchy)

        outcome = await engine.request_toggle(EntityKind.SELLER, seller.id)

        assert outcome.accepted is True
        assert outcome.is_active is False
        assert hierarchy.state(seller) is False

    async def test_deactivating_distributor_does_not_cascade(self, hierarchy):
        """Test descendants keep their state when the distributor is deactivated."""
        distributor, location, seller = build_chain(hierarchy, True, True, True)
        engine = ActivationEngine(hierarchy)

        outcome = await engine.request_toggle(EntityKind.DISTRIBUTOR, distributor.id)

        assert outcome.is_active is False
        assert hierarchy.state(location) is True
        assert hierarchy.state(seller) is True
        assert hierarchy.writes == [(EntityKind.DISTRIBUTOR, distributor.id)]

    @pytest.mark.parametrize(
        "kind,error,message",
        [
            (EntityKind.DISTRIBUTOR, DistributorNotFoundError, "Distributor not found"),
            (EntityKind.LOCATION, LocationNotFoundError, "Location not found"),
            (EntityKind.SELLER, SellerNotFoundError, "Seller not found"),
        ],
    )
    async def test_unknown_entity(self, hierarchy, kind, error, message):
        """Test unknown IDs raise the kind's not-found error."""
        engine = ActivationEngine(hierarchy)

        with pytest.raises(error) as exc_info:
            await engine.request_toggle(kind, uuid.uuid4())

        assert exc_info.value.message == message

    async def test_concurrent_change_is_reported(self, hierarchy):
        """Test a flag changed between read and write is not overwritten."""
        distributor, _, _ = build_chain(hierarchy, True, True, True)
        hierarchy.interfere_next_write = True
        engine = ActivationEngine(hierarchy)

        with pytest.raises(ConcurrentStatusChangeError):
            await engine.request_toggle(EntityKind.DISTRIBUTOR, distributor.id)

        # the concurrent writer's value stands
        assert hierarchy.state(distributor) is False
        assert hierarchy.writes == []
