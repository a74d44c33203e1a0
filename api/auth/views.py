"""
Authentication API views.

Session based sign-in for the admin console and partner portals.
"""

from asgiref.sync import async_to_sync
from django.middleware.csrf import get_token, rotate_token
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.application.commands.login import LoginCommand
from accounts.application.dto.account_dto import AccountDTO
from accounts.application.handlers.login_handler import LoginHandler
from accounts.infrastructure.repositories.django_account_repository import (
    DjangoAccountRepository,
)
from api.auth.serializers import AccountSerializer, LoginRequestSerializer
from api.exceptions import error_response
from core.instrumentation import Status, StatusCode, get_tracer
from core.middleware.auth import SESSION_ACCOUNT_KEY

# Initialize repositories (in production, use DI container)
_account_repo = DjangoAccountRepository()

tracer = get_tracer(__name__)


class LoginView(APIView):
    """View for signing in."""

    @extend_schema(
        operation_id="login",
        summary="Login",
        description=(
            "Check email and password and start a session. The response sets the "
            "csrftoken cookie; echo it in X-CSRFToken on state-changing requests."
        ),
        tags=["Auth API"],
        request=LoginRequestSerializer,
        responses={
            200: AccountSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Invalid email or password"},
            429: {"description": "Too many requests"},
        },
    )
    def post(self, request: Request) -> Response:
        """Sign in."""
        with tracer.start_as_current_span("login") as span:
            serializer = LoginRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                serializer.is_valid(raise_exception=True)

            handler = LoginHandler(account_repository=_account_repo)
            account: AccountDTO = async_to_sync(handler.handle)(
                LoginCommand(
                    email=serializer.validated_data["email"],
                    password=serializer.validated_data["password"],
                )
            )

            # new session key and CSRF token on sign-in
            request.session.cycle_key()
            request.session[SESSION_ACCOUNT_KEY] = str(account.id)
            rotate_token(request)

            span.set_attribute("account.id", str(account.id))
            span.set_attribute("account.role", account.role)
            span.set_status(Status(StatusCode.OK))
            return Response(AccountSerializer(account).data)


class LogoutView(APIView):
    """View for signing out."""

    @extend_schema(
        operation_id="logout",
        summary="Logout",
        description="End the current session.",
        tags=["Auth API"],
        request=None,
        responses={204: None},
    )
    def post(self, request: Request) -> Response:
        """Sign out."""
        request.session.flush()
        return Response(status=status.HTTP_204_NO_CONTENT)


class SessionView(APIView):
    """View returning the signed-in account."""

    @extend_schema(
        operation_id="current_session",
        summary="Current Session",
        description="Return the signed-in account.",
        tags=["Auth API"],
        responses={200: AccountSerializer, 401: {"description": "Not signed in"}},
    )
    def get(self, request: Request) -> Response:
        """Get the current account."""
        account = getattr(request, "account", None)
        if account is None:
            return error_response("Authentication required", "UNAUTHENTICATED", 401)

        # re-issue the csrftoken cookie for clients that lost it
        get_token(request)
        return Response(
            AccountSerializer(
                AccountDTO(id=account.id, name=account.name, email=account.email, role=account.role)
            ).data
        )
