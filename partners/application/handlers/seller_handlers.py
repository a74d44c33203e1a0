"""
Seller administration handlers.
"""

import logging

from accounts.application.services.account_provisioning import AccountProvisioningService
from accounts.ports.account_repository import AccountRepository
from core.domain.exceptions import LocationNotFoundError, ValidationError
from core.domain.value_objects import UserRole
from partners.application.commands.create_seller import CreateSellerCommand
from partners.application.dto.mappers import seller_to_dto
from partners.application.dto.partner_dto import SellerDTO
from partners.domain.seller import Seller, SellerConfig
from partners.ports.location_repository import LocationRepository
from partners.ports.seller_repository import SellerRepository

logger = logging.getLogger(__name__)


class CreateSellerHandler:
    """Handler for CreateSellerCommand."""

    def __init__(
        self,
        location_repository: LocationRepository,
        seller_repository: SellerRepository,
        account_repository: AccountRepository,
    ):
        """Initialize handler with repositories."""
        self.location_repository = location_repository
        self.seller_repository = seller_repository
        self.accounts = AccountProvisioningService(account_repository)

    async def handle(self, command: CreateSellerCommand) -> SellerDTO:
        """
        Handle create seller command.

        Args:
            command: CreateSellerCommand

        Returns:
            SellerDTO of the new, active seller with its configuration

        Raises:
            LocationNotFoundError: If location not found
            ValidationError: If a field or the configuration is invalid
        """
        location = await self.location_repository.find_by_id(command.location_id)
        if not location:
            raise LocationNotFoundError(f"Location {command.location_id} not found")
        if not command.name or not command.name.strip():
            raise ValidationError("Seller name is required")

        cfg = command.config
        try:
            config = SellerConfig(
                send_method=cfg.send_method,
                landing_page_required=cfg.landing_page_required,
                allow_custom_guests_days=cfg.allow_custom_guests_days,
                default_guests=cfg.default_guests,
                default_days=cfg.default_days,
                pricing_type=cfg.pricing_type,
                fixed_price=cfg.fixed_price,
                send_rebuy_email=cfg.send_rebuy_email,
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e

        account = await self.accounts.new_account(
            name=command.name,
            email=command.email,
            password=command.password,
            role=UserRole.SELLER,
        )

        seller = Seller.create(
            location_id=location.id,
            name=command.name,
            account_id=account.id,
            config=config,
        )
        saved = await self.seller_repository.save_with_account(seller, account)
        logger.info("Created seller %s at location %s", saved.id, location.id)
        return seller_to_dto(saved, account)
