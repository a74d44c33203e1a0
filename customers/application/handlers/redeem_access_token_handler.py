"""
RedeemAccessTokenHandler.

Handler resolving a customer access token into the customer's profile
and QR codes.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from core.domain.exceptions import (
    AccessTokenExpiredError,
    AccessTokenNotFoundError,
    AccessTokenRequiredError,
)
from core.infrastructure.events import event_bus
from customers.application.dto.customer_access_dto import CustomerAccessDTO, QRCodeDTO
from customers.application.queries.redeem_access_token import RedeemAccessTokenQuery
from customers.domain.events import CustomerAccessTokenRedeemed
from customers.domain.language import LanguageDetector
from customers.ports.access_token_repository import AccessTokenRepository
from customers.ports.qr_code_repository import QRCodeRepository

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RedeemAccessTokenHandler:
    """Handler for RedeemAccessTokenQuery."""

    def __init__(
        self,
        access_token_repository: AccessTokenRepository,
        qr_code_repository: QRCodeRepository,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize handler with repositories."""
        self.access_token_repository = access_token_repository
        self.qr_code_repository = qr_code_repository
        self.clock = clock or _utcnow

    async def handle(self, query: RedeemAccessTokenQuery) -> CustomerAccessDTO:
        """
        Handle redeem access token query.

        A token can be read any number of times until it expires. Only
        the first read records ``used_at`` and publishes
        CustomerAccessTokenRedeemed.

        Args:
            query: RedeemAccessTokenQuery

        Returns:
            CustomerAccessDTO with the customer's QR codes, newest first

        Raises:
            AccessTokenRequiredError: If the token is missing or blank
            AccessTokenNotFoundError: If the token is unknown
            AccessTokenExpiredError: If the token is past its expiry
        """
        if not query.token or not query.token.strip():
            raise AccessTokenRequiredError()

        language = LanguageDetector.detect(query.accept_language)

        access_token = await self.access_token_repository.find_by_token(query.token.strip())
        if not access_token:
            raise AccessTokenNotFoundError()

        now = self.clock()
        if access_token.is_expired(now):
            raise AccessTokenExpiredError()

        if not access_token.is_used:
            first_use = await self.access_token_repository.mark_used(access_token.id, now)
            if first_use:
                logger.info("Access token %s redeemed for the first time", access_token.id)
                await event_bus.publish(
                    CustomerAccessTokenRedeemed(
                        token_id=access_token.id,
                        customer_email=access_token.customer_email,
                    )
                )

        qr_codes = await self.qr_code_repository.find_by_customer_email(
            access_token.customer_email
        )

        return CustomerAccessDTO(
            name=access_token.customer_name,
            email=access_token.customer_email,
            language=language,
            qr_codes=[
                QRCodeDTO(
                    id=qr.id,
                    code=qr.code,
                    seller_id=qr.seller_id,
                    customer_name=qr.customer_name,
                    customer_email=qr.customer_email,
                    guests=qr.guests,
                    days=qr.days,
                    cost=qr.cost,
                    expires_at=qr.expires_at,
                    is_active=qr.is_active,
                    created_at=qr.created_at,
                )
                for qr in qr_codes
            ],
        )
