"""
Django implementation of DistributorRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import uuid
from typing import Dict, List, Optional

from asgiref.sync import sync_to_async
from django.db import transaction
from django.db.models import Count

from accounts.domain.account import Account
from accounts.infrastructure.repositories.django_account_repository import save_account_model
from partners.domain.distributor import ContactDetails, Distributor
from partners.infrastructure.models import Distributor as DistributorModel
from partners.ports.distributor_repository import DistributorRepository

_EDITABLE_FIELDS = [
    "name",
    "contact_person",
    "email",
    "alternative_email",
    "telephone",
    "notes",
    "updated_at",
]


class DjangoDistributorRepository(DistributorRepository):
    """
    Django ORM implementation of DistributorRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: DistributorModel) -> Distributor:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Distributor model

        Returns:
            Distributor domain entity
        """
        return Distributor(
            id=model.id,
            name=model.name,
            is_active=model.is_active,
            account_id=model.user_id,
            contact=ContactDetails(
                contact_person=model.contact_person,
                email=model.email,
                alternative_email=model.alternative_email,
                telephone=model.telephone,
                notes=model.notes,
            ),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _save(self, distributor: Distributor) -> DistributorModel:
        contact = distributor.contact
        fields = {
            "name": distributor.name,
            "contact_person": contact.contact_person,
            "email": contact.email,
            "alternative_email": contact.alternative_email,
            "telephone": contact.telephone,
            "notes": contact.notes,
        }
        # pylint: disable=no-member
        model, created = DistributorModel.objects.get_or_create(
            id=distributor.id,
            defaults={
                **fields,
                "user_id": distributor.account_id,
                "is_active": distributor.is_active,
            },
        )
        if not created:
            for field, value in fields.items():
                setattr(model, field, value)
            model.save(update_fields=_EDITABLE_FIELDS)
        return model

    async def save(self, distributor: Distributor) -> Distributor:
        """
        Save a distributor entity.

        Args:
            distributor: Distributor entity to save

        Returns:
            Saved distributor entity
        """
        model = await sync_to_async(self._save)(distributor)
        return self._to_domain(model)

    def _save_with_account(self, distributor: Distributor, account: Account) -> DistributorModel:
        with transaction.atomic():
            save_account_model(account)
            return self._save(distributor)

    async def save_with_account(self, distributor: Distributor, account: Account) -> Distributor:
        """
        Save a distributor and its owning account in one transaction.

        Args:
            distributor: Distributor entity to save
            account: Owning account, new or edited

        Returns:
            Saved distributor entity
        """
        model = await sync_to_async(self._save_with_account)(distributor, account)
        return self._to_domain(model)

    async def find_by_id(self, distributor_id: uuid.UUID) -> Optional[Distributor]:
        """
        Find a distributor by ID.

        Args:
            distributor_id: Distributor UUID

        Returns:
            Distributor entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = await sync_to_async(DistributorModel.objects.get)(id=distributor_id)
            return self._to_domain(model)
        except DistributorModel.DoesNotExist:  # pylint: disable=no-member
            return None

    async def find_all(self) -> List[Distributor]:
        """
        Find all distributors ordered by name.

        Returns:
            List of Distributor entities
        """
        models = await sync_to_async(
            lambda: list(DistributorModel.objects.order_by("name"))  # pylint: disable=no-member
        )()
        return [self._to_domain(model) for model in models]

    async def location_counts(self) -> Dict[uuid.UUID, int]:
        """
        Count locations per distributor.

        Returns:
            Mapping of distributor ID to number of locations
        """
        rows = await sync_to_async(
            lambda: list(
                DistributorModel.objects.annotate(  # pylint: disable=no-member
                    location_count=Count("locations")
                ).values_list("id", "location_count")
            )
        )()
        return dict(rows)
