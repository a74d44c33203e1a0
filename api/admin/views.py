"""
Administrative API views.

These endpoints are used by the admin console to:
- Toggle the status of distributors, locations and sellers
- List, inspect, create and edit partners

All of them require a signed-in ADMIN account (enforced by
RoleAuthenticationMiddleware).
"""

import uuid
from decimal import Decimal
from typing import Any, Dict, Optional

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.serializers import Serializer
from rest_framework.views import APIView

from accounts.infrastructure.repositories.django_account_repository import (
    DjangoAccountRepository,
)
from activations.application.commands.toggle_status import ToggleStatusCommand
from activations.application.handlers.toggle_status_handler import ToggleStatusHandler
from activations.infrastructure.repositories.django_hierarchy_repository import (
    DjangoHierarchyRepository,
)
from api.admin.serializers import (
    CreateLocationRequestSerializer,
    DistributorListItemSerializer,
    DistributorRequestSerializer,
    DistributorSerializer,
    LocationRequestSerializer,
    LocationSerializer,
    SellerRequestSerializer,
    SellerSerializer,
    ToggleStatusResponseSerializer,
)
from core.domain.exceptions import ActivationBlockedError
from core.domain.value_objects import EntityKind, PricingType, SendMethod
from core.instrumentation import Status, StatusCode, get_tracer
from partners.application.commands.create_distributor import CreateDistributorCommand
from partners.application.commands.create_location import CreateLocationCommand
from partners.application.commands.create_seller import CreateSellerCommand, SellerConfigInput
from partners.application.commands.update_distributor import UpdateDistributorCommand
from partners.application.commands.update_location import UpdateLocationCommand
from partners.application.handlers.distributor_handlers import (
    CreateDistributorHandler,
    GetDistributorDetailsHandler,
    ListDistributorsHandler,
    UpdateDistributorHandler,
)
from partners.application.handlers.location_handlers import (
    CreateLocationHandler,
    UpdateLocationHandler,
)
from partners.application.handlers.seller_handlers import CreateSellerHandler
from partners.application.queries.get_distributor_details import GetDistributorDetailsQuery
from partners.application.queries.list_distributors import ListDistributorsQuery
from partners.infrastructure.repositories.django_distributor_repository import (
    DjangoDistributorRepository,
)
from partners.infrastructure.repositories.django_location_repository import (
    DjangoLocationRepository,
)
from partners.infrastructure.repositories.django_seller_repository import (
    DjangoSellerRepository,
)

# Initialize repositories (in production, use DI container)
_account_repo = DjangoAccountRepository()
_distributor_repo = DjangoDistributorRepository()
_location_repo = DjangoLocationRepository()
_seller_repo = DjangoSellerRepository()
_hierarchy_repo = DjangoHierarchyRepository()

tracer = get_tracer(__name__)

_ERROR_RESPONSES = {
    400: {"description": "Bad Request"},
    401: {"description": "Unauthorized - not signed in"},
    403: {"description": "Forbidden - ADMIN role required"},
}


def _validated(serializer: Serializer, span) -> Dict[str, Any]:
    """Validate request data, marking the span on failure."""
    if not serializer.is_valid():
        span.set_attribute("error", "validation_failed")
        span.set_attribute("error.details", str(serializer.errors))
        span.set_status(Status(StatusCode.ERROR, "Validation failed"))
        serializer.is_valid(raise_exception=True)
    return serializer.validated_data


def _optional(data: Dict[str, Any], key: str) -> Optional[str]:
    """Read an optional text field, treating blank strings as missing."""
    value = data.get(key)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


class ToggleStatusView(APIView):
    """View for toggling the active flag of a hierarchy node."""

    entity_kind: EntityKind = None

    @extend_schema(
        summary="Toggle Status",
        description=(
            "Flip the active flag of a distributor, location or seller. "
            "Activating a location or seller is refused with 409 while an "
            "ancestor is inactive; deactivation never cascades."
        ),
        tags=["Admin API"],
        request=None,
        responses={
            200: ToggleStatusResponseSerializer,
            **_ERROR_RESPONSES,
            404: {"description": "Not Found"},
            409: {"description": "Conflict - blocked by an inactive ancestor or concurrent change"},
        },
    )
    def patch(self, request: Request, entity_id: uuid.UUID) -> Response:
        """Toggle the status of an entity."""
        return async_to_sync(self._handle_toggle)(request, entity_id)

    async def _handle_toggle(self, request: Request, entity_id: uuid.UUID) -> Response:
        """Async handler for toggle status."""
        kind = self.entity_kind
        with tracer.start_as_current_span(f"toggle_{kind.value}_status") as span:
            span.set_attribute("entity.kind", kind.value)
            span.set_attribute("entity.id", str(entity_id))

            handler = ToggleStatusHandler(hierarchy_repository=_hierarchy_repo)
            result = await handler.handle(
                ToggleStatusCommand(entity_kind=kind, entity_id=entity_id)
            )

            if not result.accepted:
                span.set_attribute("blocked_by.kind", result.blocker_kind)
                span.set_attribute("blocked_by.id", str(result.blocker_id))
                span.set_status(Status(StatusCode.ERROR, "Blocked by ancestor"))
                raise ActivationBlockedError(
                    result.message,
                    blocker_kind=result.blocker_kind,
                    blocker_id=result.blocker_id,
                )

            span.set_attribute("entity.is_active", result.is_active)
            span.set_status(Status(StatusCode.OK))
            return Response(ToggleStatusResponseSerializer(result).data)


class DistributorListView(APIView):
    """View for listing and creating distributors."""

    @extend_schema(
        operation_id="list_distributors",
        summary="List Distributors",
        description="List every distributor with its owning account and location count.",
        tags=["Admin API"],
        responses={200: DistributorListItemSerializer(many=True), **_ERROR_RESPONSES},
    )
    def get(self, request: Request) -> Response:
        """List distributors."""
        return async_to_sync(self._handle_list)(request)

    async def _handle_list(self, request: Request) -> Response:
        """Async handler for list distributors."""
        with tracer.start_as_current_span("list_distributors") as span:
            handler = ListDistributorsHandler(
                distributor_repository=_distributor_repo,
                account_repository=_account_repo,
            )
            result = await handler.handle(ListDistributorsQuery())
            span.set_attribute("distributors.count", len(result))
            span.set_status(Status(StatusCode.OK))
            return Response(DistributorListItemSerializer(result, many=True).data)

    @extend_schema(
        operation_id="create_distributor",
        summary="Create Distributor",
        description="Create an active distributor together with its DISTRIBUTOR account.",
        tags=["Admin API"],
        request=DistributorRequestSerializer,
        responses={201: DistributorSerializer, **_ERROR_RESPONSES},
    )
    def post(self, request: Request) -> Response:
        """Create a distributor."""
        return async_to_sync(self._handle_create)(request)

    async def _handle_create(self, request: Request) -> Response:
        """Async handler for create distributor."""
        with tracer.start_as_current_span("create_distributor") as span:
            data = _validated(DistributorRequestSerializer(data=request.data), span)

            handler = CreateDistributorHandler(
                distributor_repository=_distributor_repo,
                account_repository=_account_repo,
            )
            result = await handler.handle(
                CreateDistributorCommand(
                    name=data["name"],
                    email=data["email"],
                    password=data.get("password", ""),
                    contact_person=_optional(data, "contact_person"),
                    alternative_email=_optional(data, "alternative_email"),
                    telephone=_optional(data, "telephone"),
                    notes=_optional(data, "notes"),
                )
            )

            span.set_attribute("distributor.id", str(result.id))
            span.set_status(Status(StatusCode.OK))
            return Response(DistributorSerializer(result).data, status=status.HTTP_201_CREATED)


class DistributorDetailView(APIView):
    """View for inspecting and editing a distributor."""

    @extend_schema(
        operation_id="get_distributor",
        summary="Get Distributor Details",
        description="Get a distributor with its locations, their sellers and seller configuration.",
        tags=["Admin API"],
        parameters=[
            OpenApiParameter(
                name="distributor_id",
                type=uuid.UUID,
                location=OpenApiParameter.PATH,
                description="Distributor ID",
            ),
        ],
        responses={200: DistributorSerializer, **_ERROR_RESPONSES, 404: {"description": "Not Found"}},
    )
    def get(self, request: Request, distributor_id: uuid.UUID) -> Response:
        """Get distributor details."""
        return async_to_sync(self._handle_get)(request, distributor_id)

    async def _handle_get(self, request: Request, distributor_id: uuid.UUID) -> Response:
        """Async handler for get distributor details."""
        with tracer.start_as_current_span("get_distributor_details") as span:
            span.set_attribute("distributor.id", str(distributor_id))

            handler = GetDistributorDetailsHandler(
                distributor_repository=_distributor_repo,
                location_repository=_location_repo,
                seller_repository=_seller_repo,
                account_repository=_account_repo,
            )
            result = await handler.handle(GetDistributorDetailsQuery(distributor_id=distributor_id))

            span.set_attribute("locations.count", len(result.locations))
            span.set_status(Status(StatusCode.OK))
            return Response(DistributorSerializer(result).data)

    @extend_schema(
        operation_id="update_distributor",
        summary="Update Distributor",
        description=(
            "Edit a distributor and its account. The password is only changed "
            "when a non-empty password is sent."
        ),
        tags=["Admin API"],
        request=DistributorRequestSerializer,
        responses={200: DistributorSerializer, **_ERROR_RESPONSES, 404: {"description": "Not Found"}},
    )
    def put(self, request: Request, distributor_id: uuid.UUID) -> Response:
        """Update a distributor."""
        return async_to_sync(self._handle_update)(request, distributor_id)

    async def _handle_update(self, request: Request, distributor_id: uuid.UUID) -> Response:
        """Async handler for update distributor."""
        with tracer.start_as_current_span("update_distributor") as span:
            span.set_attribute("distributor.id", str(distributor_id))
            data = _validated(DistributorRequestSerializer(data=request.data), span)

            handler = UpdateDistributorHandler(
                distributor_repository=_distributor_repo,
                account_repository=_account_repo,
            )
            result = await handler.handle(
                UpdateDistributorCommand(
                    distributor_id=distributor_id,
                    name=data["name"],
                    email=data["email"],
                    contact_person=_optional(data, "contact_person"),
                    alternative_email=_optional(data, "alternative_email"),
                    telephone=_optional(data, "telephone"),
                    notes=_optional(data, "notes"),
                    password=_optional(data, "password"),
                )
            )

            span.set_status(Status(StatusCode.OK))
            return Response(DistributorSerializer(result).data)


class LocationCreateView(APIView):
    """View for creating locations."""

    @extend_schema(
        operation_id="create_location",
        summary="Create Location",
        description="Create an active location under a distributor, with its LOCATION account.",
        tags=["Admin API"],
        request=CreateLocationRequestSerializer,
        responses={201: LocationSerializer, **_ERROR_RESPONSES, 404: {"description": "Not Found"}},
    )
    def post(self, request: Request) -> Response:
        """Create a location."""
        return async_to_sync(self._handle_create)(request)

    async def _handle_create(self, request: Request) -> Response:
        """Async handler for create location."""
        with tracer.start_as_current_span("create_location") as span:
            data = _validated(CreateLocationRequestSerializer(data=request.data), span)
            span.set_attribute("distributor.id", str(data["distributor_id"]))

            handler = CreateLocationHandler(
                distributor_repository=_distributor_repo,
                location_repository=_location_repo,
                account_repository=_account_repo,
            )
            result = await handler.handle(
                CreateLocationCommand(
                    distributor_id=data["distributor_id"],
                    name=data["name"],
                    email=data["email"],
                    password=data.get("password", ""),
                    contact_person=_optional(data, "contact_person"),
                    telephone=_optional(data, "telephone"),
                    notes=_optional(data, "notes"),
                )
            )

            span.set_attribute("location.id", str(result.id))
            span.set_status(Status(StatusCode.OK))
            return Response(LocationSerializer(result).data, status=status.HTTP_201_CREATED)


class LocationDetailView(APIView):
    """View for editing a location."""

    @extend_schema(
        operation_id="update_location",
        summary="Update Location",
        description="Edit a location and its account.",
        tags=["Admin API"],
        request=LocationRequestSerializer,
        responses={200: LocationSerializer, **_ERROR_RESPONSES, 404: {"description": "Not Found"}},
    )
    def put(self, request: Request, location_id: uuid.UUID) -> Response:
        """Update a location."""
        return async_to_sync(self._handle_update)(request, location_id)

    async def _handle_update(self, request: Request, location_id: uuid.UUID) -> Response:
        """Async handler for update location."""
        with tracer.start_as_current_span("update_location") as span:
            span.set_attribute("location.id", str(location_id))
            data = _validated(LocationRequestSerializer(data=request.data), span)

            handler = UpdateLocationHandler(
                location_repository=_location_repo,
                account_repository=_account_repo,
            )
            result = await handler.handle(
                UpdateLocationCommand(
                    location_id=location_id,
                    name=data["name"],
                    email=data["email"],
                    contact_person=_optional(data, "contact_person"),
                    telephone=_optional(data, "telephone"),
                    notes=_optional(data, "notes"),
                    password=_optional(data, "password"),
                )
            )

            span.set_status(Status(StatusCode.OK))
            return Response(LocationSerializer(result).data)


class SellerCreateView(APIView):
    """View for creating sellers."""

    @extend_schema(
        operation_id="create_seller",
        summary="Create Seller",
        description="Create an active seller under a location, with its SELLER account and QR configuration.",
        tags=["Admin API"],
        request=SellerRequestSerializer,
        responses={201: SellerSerializer, **_ERROR_RESPONSES, 404: {"description": "Not Found"}},
    )
    def post(self, request: Request) -> Response:
        """Create a seller."""
        return async_to_sync(self._handle_create)(request)

    async def _handle_create(self, request: Request) -> Response:
        """Async handler for create seller."""
        with tracer.start_as_current_span("create_seller") as span:
            data = _validated(SellerRequestSerializer(data=request.data), span)
            span.set_attribute("location.id", str(data["location_id"]))

            config = data.get("config") or {}
            handler = CreateSellerHandler(
                location_repository=_location_repo,
                seller_repository=_seller_repo,
                account_repository=_account_repo,
            )
            result = await handler.handle(
                CreateSellerCommand(
                    location_id=data["location_id"],
                    name=data["name"],
                    email=data["email"],
                    password=data["password"],
                    config=SellerConfigInput(
                        send_method=SendMethod(config.get("send_method", SendMethod.URL.value)),
                        landing_page_required=config.get("landing_page_required", True),
                        allow_custom_guests_days=config.get("allow_custom_guests_days", False),
                        default_guests=config.get("default_guests", 2),
                        default_days=config.get("default_days", 3),
                        pricing_type=PricingType(
                            config.get("pricing_type", PricingType.FIXED.value)
                        ),
                        fixed_price=Decimal(config.get("fixed_price", 0)),
                        send_rebuy_email=config.get("send_rebuy_email", False),
                    ),
                )
            )

            span.set_attribute("seller.id", str(result.id))
            span.set_status(Status(StatusCode.OK))
            return Response(SellerSerializer(result).data, status=status.HTTP_201_CREATED)
