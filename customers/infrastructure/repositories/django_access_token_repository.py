"""
Django implementation of AccessTokenRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import logging
import uuid
from datetime import datetime
from typing import Optional

from asgiref.sync import sync_to_async
from django.db import DatabaseError

from customers.domain.access_token import CustomerAccessToken
from customers.infrastructure.models import CustomerAccessToken as CustomerAccessTokenModel
from customers.ports.access_token_repository import AccessTokenRepository

logger = logging.getLogger(__name__)


class DjangoAccessTokenRepository(AccessTokenRepository):
    """Django ORM implementation of AccessTokenRepository."""

    def _to_domain(self, model: CustomerAccessTokenModel) -> CustomerAccessToken:
        """
        Convert Django model to domain entity.

        Args:
            model: Django CustomerAccessToken model

        Returns:
            CustomerAccessToken domain entity
        """
        return CustomerAccessToken(
            id=model.id,
            token=model.token,
            customer_name=model.customer_name,
            customer_email=model.customer_email,
            qr_code_id=model.qr_code_id,
            expires_at=model.expires_at,
            used_at=model.used_at,
            created_at=model.created_at,
        )

    def _save(self, token: CustomerAccessToken) -> CustomerAccessTokenModel:
        # pylint: disable=no-member
        model, _ = CustomerAccessTokenModel.objects.update_or_create(
            id=token.id,
            defaults={
                "token": token.token,
                "qr_code_id": token.qr_code_id,
                "customer_name": token.customer_name,
                "customer_email": token.customer_email,
                "expires_at": token.expires_at,
                "used_at": token.used_at,
            },
        )
        return model

    async def save(self, token: CustomerAccessToken) -> CustomerAccessToken:
        """
        Save an access token entity.

        Args:
            token: CustomerAccessToken to save

        Returns:
            Saved CustomerAccessToken
        """
        model = await sync_to_async(self._save)(token)
        return self._to_domain(model)

    async def find_by_token(self, token: str) -> Optional[CustomerAccessToken]:
        """
        Find an access token by its opaque value.

        Args:
            token: Token string

        Returns:
            CustomerAccessToken or None if not found
        """
        try:
            # pylint: disable=no-member
            model = await sync_to_async(CustomerAccessTokenModel.objects.get)(token=token)
            return self._to_domain(model)
        except CustomerAccessTokenModel.DoesNotExist:  # pylint: disable=no-member
            return None

    async def mark_used(self, token_id: uuid.UUID, used_at: datetime) -> bool:
        """
        Record the first read of a token.

        Storage failures are logged and reported as "not recorded"; they
        never fail a redemption.

        Args:
            token_id: Token UUID
            used_at: Time of the read

        Returns:
            True if this call recorded the first read
        """
        try:
            updated = await sync_to_async(
                lambda: CustomerAccessTokenModel.objects.filter(  # pylint: disable=no-member
                    id=token_id, used_at__isnull=True
                ).update(used_at=used_at)
            )()
        except DatabaseError as e:
            logger.warning("Could not record first use of access token %s: %s", token_id, e)
            return False
        return updated == 1

    async def delete_expired_before(self, cutoff: datetime) -> int:
        """
        Delete tokens that expired before ``cutoff``.

        Args:
            cutoff: Expiry threshold

        Returns:
            Number of deleted tokens
        """
        deleted, _ = await sync_to_async(
            lambda: CustomerAccessTokenModel.objects.filter(  # pylint: disable=no-member
                expires_at__lt=cutoff
            ).delete()
        )()
        return deleted
