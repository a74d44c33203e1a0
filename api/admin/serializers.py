"""
Serializers for the administrative API endpoints.

Request and response keys are camelCase.
"""

from rest_framework import serializers

from core.domain.value_objects import PricingType, SendMethod


class ToggleStatusResponseSerializer(serializers.Serializer):
    """Serializer for toggle status response."""

    isActive = serializers.BooleanField(source="is_active")


class AccountSummarySerializer(serializers.Serializer):
    """Serializer for AccountSummaryDTO."""

    id = serializers.UUIDField()
    name = serializers.CharField()
    email = serializers.EmailField()
    role = serializers.CharField()
    isActive = serializers.BooleanField(source="is_active")
    createdAt = serializers.DateTimeField(source="created_at", allow_null=True)


class SellerConfigSerializer(serializers.Serializer):
    """Serializer for SellerConfigDTO and seller configuration input."""

    sendMethod = serializers.ChoiceField(
        source="send_method",
        choices=[m.value for m in SendMethod],
        required=False,
        default=SendMethod.URL.value,
    )
    landingPageRequired = serializers.BooleanField(
        source="landing_page_required", required=False, default=True
    )
    allowCustomGuestsDays = serializers.BooleanField(
        source="allow_custom_guests_days", required=False, default=False
    )
    defaultGuests = serializers.IntegerField(
        source="default_guests", required=False, default=2, min_value=1
    )
    defaultDays = serializers.IntegerField(
        source="default_days", required=False, default=3, min_value=1
    )
    pricingType = serializers.ChoiceField(
        source="pricing_type",
        choices=[p.value for p in PricingType],
        required=False,
        default=PricingType.FIXED.value,
    )
    fixedPrice = serializers.DecimalField(
        source="fixed_price",
        max_digits=10,
        decimal_places=2,
        required=False,
        default=0,
        min_value=0,
    )
    sendRebuyEmail = serializers.BooleanField(
        source="send_rebuy_email", required=False, default=False
    )


class SellerSerializer(serializers.Serializer):
    """Serializer for SellerDTO."""

    id = serializers.UUIDField()
    locationId = serializers.UUIDField(source="location_id")
    name = serializers.CharField()
    isActive = serializers.BooleanField(source="is_active")
    user = AccountSummarySerializer(allow_null=True)
    config = SellerConfigSerializer(allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")


class LocationSerializer(serializers.Serializer):
    """Serializer for LocationDTO."""

    id = serializers.UUIDField()
    distributorId = serializers.UUIDField(source="distributor_id")
    name = serializers.CharField()
    isActive = serializers.BooleanField(source="is_active")
    contactPerson = serializers.CharField(source="contact_person", allow_null=True)
    email = serializers.EmailField(allow_null=True)
    telephone = serializers.CharField(allow_null=True)
    notes = serializers.CharField(allow_null=True)
    user = AccountSummarySerializer(allow_null=True)
    sellerCount = serializers.IntegerField(source="seller_count")
    sellers = SellerSerializer(many=True)
    createdAt = serializers.DateTimeField(source="created_at")


class DistributorListItemSerializer(serializers.Serializer):
    """Serializer for DistributorSummaryDTO."""

    id = serializers.UUIDField()
    name = serializers.CharField()
    isActive = serializers.BooleanField(source="is_active")
    user = AccountSummarySerializer(allow_null=True)
    locationCount = serializers.IntegerField(source="location_count")
    createdAt = serializers.DateTimeField(source="created_at")


class DistributorSerializer(serializers.Serializer):
    """Serializer for DistributorDTO."""

    id = serializers.UUIDField()
    name = serializers.CharField()
    isActive = serializers.BooleanField(source="is_active")
    contactPerson = serializers.CharField(source="contact_person", allow_null=True)
    email = serializers.EmailField(allow_null=True)
    alternativeEmail = serializers.EmailField(source="alternative_email", allow_null=True)
    telephone = serializers.CharField(allow_null=True)
    notes = serializers.CharField(allow_null=True)
    user = AccountSummarySerializer(allow_null=True)
    locations = LocationSerializer(many=True)
    createdAt = serializers.DateTimeField(source="created_at")


class DistributorRequestSerializer(serializers.Serializer):
    """Serializer for create/update distributor requests."""

    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    password = serializers.CharField(required=False, allow_blank=True, write_only=True)
    contactPerson = serializers.CharField(
        source="contact_person", required=False, allow_blank=True, allow_null=True, max_length=255
    )
    alternativeEmail = serializers.EmailField(
        source="alternative_email", required=False, allow_blank=True, allow_null=True
    )
    telephone = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=50
    )
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class LocationRequestSerializer(serializers.Serializer):
    """Serializer for update location requests."""

    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    password = serializers.CharField(required=False, allow_blank=True, write_only=True)
    contactPerson = serializers.CharField(
        source="contact_person", required=False, allow_blank=True, allow_null=True, max_length=255
    )
    telephone = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=50
    )
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class CreateLocationRequestSerializer(LocationRequestSerializer):
    """Serializer for create location request."""

    distributorId = serializers.UUIDField(source="distributor_id")


class SellerRequestSerializer(serializers.Serializer):
    """Serializer for create seller request."""

    locationId = serializers.UUIDField(source="location_id")
    name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)
    config = SellerConfigSerializer(required=False)
