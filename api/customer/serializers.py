"""
Serializers for the customer API endpoints.
"""

from rest_framework import serializers


class QRCodeSerializer(serializers.Serializer):
    """Serializer for QRCodeDTO."""

    id = serializers.UUIDField()
    code = serializers.CharField()
    sellerId = serializers.UUIDField(source="seller_id")
    customerName = serializers.CharField(source="customer_name")
    customerEmail = serializers.CharField(source="customer_email")
    guests = serializers.IntegerField()
    days = serializers.IntegerField()
    cost = serializers.DecimalField(max_digits=10, decimal_places=2)
    expiresAt = serializers.DateTimeField(source="expires_at")
    isActive = serializers.BooleanField(source="is_active")
    createdAt = serializers.DateTimeField(source="created_at")


class CustomerAccessResponseSerializer(serializers.Serializer):
    """Serializer for CustomerAccessDTO."""

    name = serializers.CharField()
    # echoed as stored
    email = serializers.CharField()
    language = serializers.CharField()
    qrCodes = QRCodeSerializer(source="qr_codes", many=True)
