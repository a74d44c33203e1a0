"""
Customer API views.

Public endpoint resolving a customer access token into the customer's
QR codes.
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.customer.serializers import CustomerAccessResponseSerializer
from core.instrumentation import Status, StatusCode, get_tracer
from customers.application.handlers.redeem_access_token_handler import RedeemAccessTokenHandler
from customers.application.queries.redeem_access_token import RedeemAccessTokenQuery
from customers.infrastructure.repositories.django_access_token_repository import (
    DjangoAccessTokenRepository,
)
from customers.infrastructure.repositories.django_qr_code_repository import (
    DjangoQRCodeRepository,
)

# Initialize repositories (in production, use DI container)
_access_token_repo = DjangoAccessTokenRepository()
_qr_code_repo = DjangoQRCodeRepository()

tracer = get_tracer(__name__)


class CustomerAccessView(APIView):
    """View for redeeming a customer access token."""

    @extend_schema(
        operation_id="customer_access",
        summary="Customer Access",
        description=(
            "Resolve an access token into the customer's name, email, preferred "
            "language (from Accept-Language) and QR codes, newest first. "
            "The token stays readable until it expires."
        ),
        tags=["Customer API"],
        parameters=[
            OpenApiParameter(
                name="token",
                type=str,
                location=OpenApiParameter.QUERY,
                required=True,
                description="Customer access token",
            ),
        ],
        responses={
            200: CustomerAccessResponseSerializer,
            400: {"description": "Access token is required"},
            401: {"description": "Access token has expired"},
            404: {"description": "Invalid or expired access token"},
            429: {"description": "Too many requests"},
        },
    )
    def get(self, request: Request) -> Response:
        """Redeem a customer access token."""
        return async_to_sync(self._handle_access)(request)

    async def _handle_access(self, request: Request) -> Response:
        """Async handler for customer access."""
        with tracer.start_as_current_span("customer_access") as span:
            span.set_attribute("operation", "customer_access")

            handler = RedeemAccessTokenHandler(
                access_token_repository=_access_token_repo,
                qr_code_repository=_qr_code_repo,
            )
            result = await handler.handle(
                RedeemAccessTokenQuery(
                    token=request.query_params.get("token"),
                    accept_language=request.headers.get("Accept-Language"),
                )
            )

            span.set_attribute("customer.language", result.language)
            span.set_attribute("qr_codes.count", len(result.qr_codes))
            span.set_status(Status(StatusCode.OK))
            return Response(CustomerAccessResponseSerializer(result).data)
