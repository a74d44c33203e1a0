"""
LoginHandler.

Handler for authenticating an account.
"""

import logging

from accounts.application.commands.login import LoginCommand
from accounts.application.dto.account_dto import AccountDTO
from accounts.domain.services import PasswordHasher
from accounts.ports.account_repository import AccountRepository
from core.domain.exceptions import InvalidCredentialsError

logger = logging.getLogger(__name__)


class LoginHandler:
    """Handler for LoginCommand."""

    def __init__(self, account_repository: AccountRepository):
        """Initialize handler with repositories."""
        self.account_repository = account_repository

    async def handle(self, command: LoginCommand) -> AccountDTO:
        """
        Handle login command.

        Args:
            command: LoginCommand

        Returns:
            AccountDTO for the authenticated account

        Raises:
            InvalidCredentialsError: If the email is unknown, the password
                does not match or the account is inactive
        """
        account = await self.account_repository.find_by_email(command.email or "")

        if not account or not PasswordHasher.verify(account, command.password):
            logger.info("Rejected login attempt for %s", command.email)
            raise InvalidCredentialsError()

        if not account.is_active:
            logger.info("Rejected login for inactive account %s", account.id)
            raise InvalidCredentialsError()

        return AccountDTO(
            id=account.id,
            name=account.name,
            email=str(account.email),
            role=account.role.value,
        )
