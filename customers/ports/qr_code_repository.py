"""
QR code repository port (interface).
"""
from abc import ABC, abstractmethod
from typing import List

from customers.domain.qr_code import QRCode


class QRCodeRepository(ABC):
    """Abstract repository for QRCode entities."""

    @abstractmethod
    async def save(self, qr_code: QRCode) -> QRCode:
        """
        Save a QR code entity.

        Args:
            qr_code: QRCode to save

        Returns:
            Saved QRCode
        """
        pass

    @abstractmethod
    async def find_by_customer_email(self, email: str) -> List[QRCode]:
        """
        Find every QR code issued to a customer.

        Args:
            email: Customer email (case-insensitive)

        Returns:
            QR codes, newest first
        """
        pass
