"""
Distributor administration handlers.

Handlers for creating, editing, listing and inspecting distributors.
"""

import logging
from typing import List

from accounts.application.services.account_provisioning import AccountProvisioningService
from accounts.ports.account_repository import AccountRepository
from core.domain.exceptions import DistributorNotFoundError, ValidationError
from core.domain.value_objects import UserRole
from partners.application.commands.create_distributor import CreateDistributorCommand
from partners.application.commands.update_distributor import UpdateDistributorCommand
from partners.application.dto.mappers import (
    distributor_to_dto,
    distributor_to_summary,
    location_to_dto,
    seller_to_dto,
)
from partners.application.dto.partner_dto import DistributorDTO, DistributorSummaryDTO
from partners.application.queries.get_distributor_details import GetDistributorDetailsQuery
from partners.application.queries.list_distributors import ListDistributorsQuery
from partners.domain.distributor import ContactDetails, Distributor
from partners.ports.distributor_repository import DistributorRepository
from partners.ports.location_repository import LocationRepository
from partners.ports.seller_repository import SellerRepository

logger = logging.getLogger(__name__)


class CreateDistributorHandler:
    """Handler for CreateDistributorCommand."""

    def __init__(
        self,
        distributor_repository: DistributorRepository,
        account_repository: AccountRepository,
    ):
        """Initialize handler with repositories."""
        self.distributor_repository = distributor_repository
        self.accounts = AccountProvisioningService(account_repository)

    async def handle(self, command: CreateDistributorCommand) -> DistributorDTO:
        """
        Handle create distributor command.

        Args:
            command: CreateDistributorCommand

        Returns:
            DistributorDTO of the new, active distributor

        Raises:
            ValidationError: If a field is invalid or the email is taken
        """
        if not command.name or not command.name.strip():
            raise ValidationError("Distributor name is required")

        account = await self.accounts.new_account(
            name=command.name,
            email=command.email,
            password=command.password,
            role=UserRole.DISTRIBUTOR,
        )

        try:
            distributor = Distributor.create(
                name=command.name,
                account_id=account.id,
                contact=ContactDetails(
                    contact_person=command.contact_person,
                    email=str(account.email),
                    alternative_email=command.alternative_email,
                    telephone=command.telephone,
                    notes=command.notes,
                ),
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e

        saved = await self.distributor_repository.save_with_account(distributor, account)
        logger.info("Created distributor %s (%s)", saved.id, saved.name)
        return distributor_to_dto(saved, account)


class UpdateDistributorHandler:
    """Handler for UpdateDistributorCommand."""

    def __init__(
        self,
        distributor_repository: DistributorRepository,
        account_repository: AccountRepository,
    ):
        """Initialize handler with repositories."""
        self.distributor_repository = distributor_repository
        self.accounts = AccountProvisioningService(account_repository)

    async def handle(self, command: UpdateDistributorCommand) -> DistributorDTO:
        """
        Handle update distributor command.

        The owning account follows the distributor's name and email; the
        password is replaced only when one is provided.

        Raises:
            DistributorNotFoundError: If distributor not found
            ValidationError: If a field is invalid or the email is taken
        """
        distributor = await self.distributor_repository.find_by_id(command.distributor_id)
        if not distributor:
            raise DistributorNotFoundError(f"Distributor {command.distributor_id} not found")

        account = await self.accounts.edit_account(
            distributor.account_id,
            name=command.name,
            email=command.email,
            password=command.password,
        )

        try:
            updated = distributor.update_details(
                name=command.name,
                contact=ContactDetails(
                    contact_person=command.contact_person,
                    email=str(account.email),
                    alternative_email=command.alternative_email,
                    telephone=command.telephone,
                    notes=command.notes,
                ),
            )
        except ValueError as e:
            raise ValidationError(str(e)) from e

        saved = await self.distributor_repository.save_with_account(updated, account)
        logger.info("Updated distributor %s", saved.id)
        return distributor_to_dto(saved, account)


class ListDistributorsHandler:
    """Handler for ListDistributorsQuery."""

    def __init__(
        self,
        distributor_repository: DistributorRepository,
        account_repository: AccountRepository,
    ):
        """Initialize handler with repositories."""
        self.distributor_repository = distributor_repository
        self.account_repository = account_repository

    async def handle(self, query: ListDistributorsQuery) -> List[DistributorSummaryDTO]:
        """
        Handle list distributors query.

        Args:
            query: ListDistributorsQuery

        Returns:
            List of DistributorSummaryDTO ordered by name
        """
        distributors = await self.distributor_repository.find_all()
        accounts = await self.account_repository.find_by_ids([d.account_id for d in distributors])
        counts = await self.distributor_repository.location_counts()
        return [distributor_to_summary(d, accounts, counts) for d in distributors]


class GetDistributorDetailsHandler:
    """Handler for GetDistributorDetailsQuery."""

    def __init__(
        self,
        distributor_repository: DistributorRepository,
        location_repository: LocationRepository,
        seller_repository: SellerRepository,
        account_repository: AccountRepository,
    ):
        """Initialize handler with repositories."""
        self.distributor_repository = distributor_repository
        self.location_repository = location_repository
        self.seller_repository = seller_repository
        self.account_repository = account_repository

    async def handle(self, query: GetDistributorDetailsQuery) -> DistributorDTO:
        """
        Handle get distributor details query.

        Args:
            query: GetDistributorDetailsQuery

        Returns:
            DistributorDTO with locations and their sellers

        Raises:
            DistributorNotFoundError: If distributor not found
        """
        distributor = await self.distributor_repository.find_by_id(query.distributor_id)
        if not distributor:
            raise DistributorNotFoundError(f"Distributor {query.distributor_id} not found")

        locations = await self.location_repository.find_by_distributor(distributor.id)
        sellers = await self.seller_repository.find_by_locations([loc.id for loc in locations])

        account_ids = [distributor.account_id]
        account_ids += [loc.account_id for loc in locations]
        account_ids += [s.account_id for s in sellers]
        accounts = await self.account_repository.find_by_ids(account_ids)

        location_dtos = []
        for location in locations:
            seller_dtos = [
                seller_to_dto(s, accounts.get(s.account_id))
                for s in sellers
                if s.location_id == location.id
            ]
            location_dtos.append(
                location_to_dto(location, accounts.get(location.account_id), seller_dtos)
            )

        return distributor_to_dto(
            distributor, accounts.get(distributor.account_id), location_dtos
        )
