"""
Django implementation of SellerRepository port.

Sellers and their configuration are stored in two tables; the
configuration row is optional.
"""

import uuid
from decimal import Decimal
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.core.exceptions import ObjectDoesNotExist
from django.db import transaction

from accounts.domain.account import Account
from accounts.infrastructure.repositories.django_account_repository import save_account_model
from core.domain.value_objects import PricingType, SendMethod
from partners.domain.seller import Seller, SellerConfig
from partners.infrastructure.models import Seller as SellerModel
from partners.infrastructure.models import SellerConfig as SellerConfigModel
from partners.ports.seller_repository import SellerRepository


class DjangoSellerRepository(SellerRepository):
    """Django ORM implementation of SellerRepository."""

    def _config_to_domain(self, model: SellerModel) -> Optional[SellerConfig]:
        try:
            config = model.config
        except ObjectDoesNotExist:
            return None
        return SellerConfig(
            send_method=SendMethod(config.send_method),
            landing_page_required=config.landing_page_required,
            allow_custom_guests_days=config.allow_custom_guests_days,
            default_guests=config.default_guests,
            default_days=config.default_days,
            pricing_type=PricingType(config.pricing_type),
            fixed_price=Decimal(config.fixed_price),
            send_rebuy_email=config.send_rebuy_email,
        )

    def _to_domain(self, model: SellerModel) -> Seller:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Seller model (config preferably select_related)

        Returns:
            Seller domain entity
        """
        return Seller(
            id=model.id,
            location_id=model.location_id,
            name=model.name,
            is_active=model.is_active,
            account_id=model.user_id,
            config=self._config_to_domain(model),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _save(self, seller: Seller) -> SellerModel:
        with transaction.atomic():
            # pylint: disable=no-member
            model, created = SellerModel.objects.get_or_create(
                id=seller.id,
                defaults={
                    "name": seller.name,
                    "location_id": seller.location_id,
                    "user_id": seller.account_id,
                    "is_active": seller.is_active,
                },
            )
            if not created:
                model.name = seller.name
                model.save(update_fields=["name", "updated_at"])

            if seller.config is not None:
                config = seller.config
                SellerConfigModel.objects.update_or_create(  # pylint: disable=no-member
                    seller=model,
                    defaults={
                        "send_method": config.send_method.value,
                        "landing_page_required": config.landing_page_required,
                        "allow_custom_guests_days": config.allow_custom_guests_days,
                        "default_guests": config.default_guests,
                        "default_days": config.default_days,
                        "pricing_type": config.pricing_type.value,
                        "fixed_price": config.fixed_price,
                        "send_rebuy_email": config.send_rebuy_email,
                    },
                )
        # pylint: disable=no-member
        return SellerModel.objects.select_related("config").get(id=model.id)

    async def save(self, seller: Seller) -> Seller:
        """
        Save a seller entity together with its configuration.

        Args:
            seller: Seller entity to save

        Returns:
            Saved seller entity
        """
        model = await sync_to_async(self._save)(seller)
        return self._to_domain(model)

    def _save_with_account(self, seller: Seller, account: Account) -> SellerModel:
        with transaction.atomic():
            save_account_model(account)
            return self._save(seller)

    async def save_with_account(self, seller: Seller, account: Account) -> Seller:
        """
        Save a seller and its owning account in one transaction.

        Args:
            seller: Seller entity to save
            account: Owning account, new or edited

        Returns:
            Saved seller entity
        """
        model = await sync_to_async(self._save_with_account)(seller, account)
        return self._to_domain(model)

    async def find_by_id(self, seller_id: uuid.UUID) -> Optional[Seller]:
        """
        Find a seller by ID.

        Args:
            seller_id: Seller UUID

        Returns:
            Seller entity or None if not found
        """
        model = await sync_to_async(
            lambda: SellerModel.objects.select_related("config")  # pylint: disable=no-member
            .filter(id=seller_id)
            .first()
        )()
        return self._to_domain(model) if model else None

    async def find_by_locations(self, location_ids: List[uuid.UUID]) -> List[Seller]:
        """
        Find the sellers of several locations, ordered by name.

        Args:
            location_ids: Location UUIDs

        Returns:
            List of Seller entities
        """
        models = await sync_to_async(
            lambda: list(
                SellerModel.objects.select_related("config")  # pylint: disable=no-member
                .filter(location_id__in=list(location_ids))
                .order_by("name")
            )
        )()
        return [self._to_domain(model) for model in models]
