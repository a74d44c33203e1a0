"""
Location administration handlers.
"""

import logging

from accounts.application.services.account_provisioning import AccountProvisioningService
from accounts.ports.account_repository import AccountRepository
from core.domain.exceptions import DistributorNotFoundError, LocationNotFoundError, ValidationError
from core.domain.value_objects import UserRole
from partners.application.commands.create_location import CreateLocationCommand
from partners.application.commands.update_location import UpdateLocationCommand
from partners.application.dto.mappers import location_to_dto
from partners.application.dto.partner_dto import LocationDTO
from partners.domain.distributor import ContactDetails
from partners.domain.location import Location
from partners.ports.distributor_repository import DistributorRepository
from partners.ports.location_repository import LocationRepository

logger = logging.getLogger(__name__)


class CreateLocationHandler:
    """Handler for CreateLocationCommand."""

    def __init__(
        self,
        distributor_repository: DistributorRepository,
        location_repository: LocationRepository,
        account_repository: AccountRepository,
    ):
        """Initialize handler with repositories."""
        self.distributor_repository = distributor_repository
        self.location_repository = location_repository
        self.accounts = AccountProvisioningService(account_repository)

    async def handle(self, command: CreateLocationCommand) -> LocationDTO:
        """
        Handle create location command.

        The location is created active even when its distributor is not.

        Raises:
            DistributorNotFoundError: If distributor not found
            ValidationError: If a field is invalid or the email is taken
        """
        distributor = await self.distributor_repository.find_by_id(command.distributor_id)
        if not distributor:
            raise DistributorNotFoundError(f"Distributor {command.distributor_id} not found")
        if not command.name or not command.name.strip():
            raise ValidationError("Location name is required")

        account = await self.accounts.new_account(
            name=command.name,
            email=command.email,
            password=command.password,
            role=UserRole.LOCATION,
        )

        try:
            location = Location.create(
                distributor_id=distributor.id,
                name=command.name,
                account_id=account.id,
                contact=ContactDetails(
                    contact_person=command.contact_person,
                    email=str(account.email),
                    telephone=command.telephone,
                    notes=command.notes,
                ),
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e

        saved = await self.location_repository.save_with_account(location, account)
        logger.info("Created location %s under distributor %s", saved.id, distributor.id)
        return location_to_dto(saved, account)


class UpdateLocationHandler:
    """Handler for UpdateLocationCommand."""

    def __init__(
        self,
        location_repository: LocationRepository,
        account_repository: AccountRepository,
    ):
        """Initialize handler with repositories."""
        self.location_repository = location_repository
        self.accounts = AccountProvisioningService(account_repository)

    async def handle(self, command: UpdateLocationCommand) -> LocationDTO:
        """
        Handle update location command.

        Raises:
            LocationNotFoundError: If location not found
            ValidationError: If a field is invalid or the email is taken
        """
        location = await self.location_repository.find_by_id(command.location_id)
        if not location:
            raise LocationNotFoundError(f"Location {command.location_id} not found")

        account = await self.accounts.edit_account(
            location.account_id,
            name=command.name,
            email=command.email,
            password=command.password,
        )

        try:
            updated = location.update_details(
                name=command.name,
                contact=ContactDetails(
                    contact_person=command.contact_person,
                    email=str(account.email),
                    telephone=command.telephone,
                    notes=command.notes,
                ),
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e

        saved = await self.location_repository.save_with_account(updated, account)
        logger.info("Updated location %s", saved.id)
        return location_to_dto(saved, account)
