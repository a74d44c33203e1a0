"""
DRF authentication backed by the session account.

``RoleAuthenticationMiddleware`` resolves the signed-in account; this
class hands it to DRF and applies Django's CSRF check to every request
made with a session, since DRF views are otherwise CSRF exempt.
"""

from rest_framework.authentication import SessionAuthentication


class AccountSessionAuthentication(SessionAuthentication):
    """Authenticate with ``request.account`` and enforce CSRF for it."""

    def authenticate(self, request):
        account = getattr(request._request, "account", None)  # pylint: disable=protected-access
        if account is None:
            return None

        # unsafe methods need the csrftoken cookie echoed in X-CSRFToken
        self.enforce_csrf(request)
        return (account, None)
