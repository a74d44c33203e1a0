"""
Session role authentication middleware.

Resolves the signed-in account from the Django session and enforces
the ADMIN role on the administrative API.
"""

import logging
from typing import Optional

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.deprecation import MiddlewareMixin

from accounts.infrastructure.models import UserAccount

logger = logging.getLogger(__name__)

SESSION_ACCOUNT_KEY = "account_id"


def error_response(message: str, code: str, status: int) -> JsonResponse:
    """Build an error response in the API's error format."""
    response = JsonResponse({"error": message}, status=status)
    response["X-Error-Code"] = code
    return response


class RoleAuthenticationMiddleware(MiddlewareMixin):
    """
    Middleware for session authentication.

    This middleware:
    1. Attaches the signed-in account (or None) as ``request.account``
    2. Returns 401 on /api/admin/* without an active signed-in account
    3. Returns 403 on /api/admin/* for accounts without the ADMIN role
    """

    admin_prefix = "/api/admin/"

    def process_request(self, request: HttpRequest) -> Optional[HttpResponse]:
        """
        Process request and enforce the role rules.

        Args:
            request: HTTP request

        Returns:
            HttpResponse with 401/403 if access is denied, None otherwise
        """
        request.account = self._load_account(request)  # type: ignore

        if not request.path.startswith(self.admin_prefix):
            return None

        account = request.account  # type: ignore
        if account is None:
            return error_response("Authentication required", "UNAUTHENTICATED", 401)

        if account.role != "ADMIN":
            logger.warning(
                "Account %s with role %s denied access to %s",
                account.id,
                account.role,
                request.path,
            )
            return error_response("Admin access required", "FORBIDDEN", 403)

        return None

    def _load_account(self, request: HttpRequest) -> Optional[UserAccount]:
        """
        Load the active account stored in the session.

        Args:
            request: HTTP request

        Returns:
            UserAccount model or None
        """
        session = getattr(request, "session", None)
        if session is None:
            return None

        account_id = session.get(SESSION_ACCOUNT_KEY)
        if not account_id:
            return None

        # pylint: disable=no-member
        account = UserAccount.objects.filter(id=account_id, is_active=True).first()
        if account is None:
            logger.info("Dropping session of missing or inactive account %s", account_id)
            session.flush()
        return account
