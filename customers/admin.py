"""
Django admin configuration for customers app.
"""

from django.contrib import admin
from django.utils import timezone
from django.utils.html import format_html

from customers.infrastructure.models import CustomerAccessToken, QRCode


@admin.register(QRCode)
class QRCodeAdmin(admin.ModelAdmin):
    """Admin interface for QRCode model."""

    list_display = ["code", "customer_email", "seller", "guests", "days", "is_active", "expires_at"]
    list_filter = ["is_active", "created_at"]
    search_fields = ["code", "customer_email", "customer_name"]
    readonly_fields = ["id", "created_at"]

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("seller")


@admin.register(CustomerAccessToken)
class CustomerAccessTokenAdmin(admin.ModelAdmin):
    """Admin interface for CustomerAccessToken model."""

    list_display = ["customer_email", "customer_name", "expires_at", "used_at", "status_display"]
    list_filter = ["expires_at", "used_at"]
    search_fields = ["customer_email", "customer_name"]
    readonly_fields = ["id", "token", "created_at", "used_at"]

    def status_display(self, obj):
        """Display token status with color."""
        if obj.expires_at < timezone.now():
            return format_html('<span style="color: red;">Expired</span>')
        if obj.used_at:
            return format_html('<span style="color: blue;">Used</span>')
        return format_html('<span style="color: green;">Unused</span>')

    status_display.short_description = "Status"
