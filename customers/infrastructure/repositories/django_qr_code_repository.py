"""
Django implementation of QRCodeRepository port.
"""

from decimal import Decimal
from typing import List

from asgiref.sync import sync_to_async

from customers.domain.qr_code import QRCode
from customers.infrastructure.models import QRCode as QRCodeModel
from customers.ports.qr_code_repository import QRCodeRepository


class DjangoQRCodeRepository(QRCodeRepository):
    """Django ORM implementation of QRCodeRepository."""

    def _to_domain(self, model: QRCodeModel) -> QRCode:
        """Convert Django model to domain entity."""
        return QRCode(
            id=model.id,
            code=model.code,
            seller_id=model.seller_id,
            customer_name=model.customer_name,
            customer_email=model.customer_email,
            guests=model.guests,
            days=model.days,
            cost=Decimal(model.cost),
            expires_at=model.expires_at,
            is_active=model.is_active,
            created_at=model.created_at,
        )

    def _save(self, qr_code: QRCode) -> QRCodeModel:
        # pylint: disable=no-member
        model, _ = QRCodeModel.objects.update_or_create(
            id=qr_code.id,
            defaults={
                "code": qr_code.code,
                "seller_id": qr_code.seller_id,
                "customer_name": qr_code.customer_name,
                "customer_email": qr_code.customer_email,
                "guests": qr_code.guests,
                "days": qr_code.days,
                "cost": qr_code.cost,
                "expires_at": qr_code.expires_at,
                "is_active": qr_code.is_active,
            },
        )
        return model

    async def save(self, qr_code: QRCode) -> QRCode:
        """
        Save a QR code entity.

        Args:
            qr_code: QRCode to save

        Returns:
            Saved QRCode
        """
        model = await sync_to_async(self._save)(qr_code)
        return self._to_domain(model)

    async def find_by_customer_email(self, email: str) -> List[QRCode]:
        """
        Find every QR code issued to a customer, newest first.

        Args:
            email: Customer email (case-insensitive)

        Returns:
            List of QRCode entities
        """
        models = await sync_to_async(
            lambda: list(
                QRCodeModel.objects.filter(  # pylint: disable=no-member
                    customer_email__iexact=email
                ).order_by("-created_at", "-id")
            )
        )()
        return [self._to_domain(model) for model in models]
