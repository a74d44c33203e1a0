"""
Django implementation of LocationRepository port.
"""

import uuid
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.db import transaction

from accounts.domain.account import Account
from accounts.infrastructure.repositories.django_account_repository import save_account_model
from partners.domain.distributor import ContactDetails
from partners.domain.location import Location
from partners.infrastructure.models import Location as LocationModel
from partners.ports.location_repository import LocationRepository

_EDITABLE_FIELDS = ["name", "contact_person", "email", "telephone", "notes", "updated_at"]


class DjangoLocationRepository(LocationRepository):
    """Django ORM implementation of LocationRepository."""

    def _to_domain(self, model: LocationModel) -> Location:
        """Convert Django model to domain entity."""
        return Location(
            id=model.id,
            distributor_id=model.distributor_id,
            name=model.name,
            is_active=model.is_active,
            account_id=model.user_id,
            contact=ContactDetails(
                contact_person=model.contact_person,
                email=model.email,
                telephone=model.telephone,
                notes=model.notes,
            ),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _save(self, location: Location) -> LocationModel:
        contact = location.contact
        fields = {
            "name": location.name,
            "contact_person": contact.contact_person,
            "email": contact.email,
            "telephone": contact.telephone,
            "notes": contact.notes,
        }
        # pylint: disable=no-member
        model, created = LocationModel.objects.get_or_create(
            id=location.id,
            defaults={
                **fields,
                "distributor_id": location.distributor_id,
                "user_id": location.account_id,
                "is_active": location.is_active,
            },
        )
        if not created:
            for field, value in fields.items():
                setattr(model, field, value)
            model.save(update_fields=_EDITABLE_FIELDS)
        return model

    async def save(self, location: Location) -> Location:
        """
        Save a location entity.

        Args:
            location: Location entity to save

        Returns:
            Saved location entity
        """
        model = await sync_to_async(self._save)(location)
        return self._to_domain(model)

    def _save_with_account(self, location: Location, account: Account) -> LocationModel:
        with transaction.atomic():
            save_account_model(account)
            return self._save(location)

    async def save_with_account(self, location: Location, account: Account) -> Location:
        """
        Save a location and its owning account in one transaction.

        Args:
            location: Location entity to save
            account: Owning account, new or edited

        Returns:
            Saved location entity
        """
        model = await sync_to_async(self._save_with_account)(location, account)
        return self._to_domain(model)

    async def find_by_id(self, location_id: uuid.UUID) -> Optional[Location]:
        """
        Find a location by ID.

        Args:
            location_id: Location UUID

        Returns:
            Location entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = await sync_to_async(LocationModel.objects.get)(id=location_id)
            return self._to_domain(model)
        except LocationModel.DoesNotExist:  # pylint: disable=no-member
            return None

    async def find_by_distributor(self, distributor_id: uuid.UUID) -> List[Location]:
        """
        Find the locations of a distributor ordered by name.

        Args:
            distributor_id: Distributor UUID

        Returns:
            List of Location entities
        """
        models = await sync_to_async(
            lambda: list(
                LocationModel.objects.filter(  # pylint: disable=no-member
                    distributor_id=distributor_id
                ).order_by("name")
            )
        )()
        return [self._to_domain(model) for model in models]
