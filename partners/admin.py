"""
Django admin configuration for partners app.
"""

from django.contrib import admin
from django.utils.html import format_html

from partners.infrastructure.models import Distributor, Location, Seller, SellerConfig


def _status_badge(is_active):
    if is_active:
        return format_html('<span style="color: green; font-weight: bold;">✓ Active</span>')
    return format_html('<span style="color: red; font-weight: bold;">✗ Inactive</span>')


@admin.register(Distributor)
class DistributorAdmin(admin.ModelAdmin):
    """Admin interface for Distributor model."""

    list_display = ["name", "user", "is_active_display", "created_at"]
    list_filter = ["is_active", "created_at"]
    search_fields = ["name", "email", "user__email", "contact_person"]
    readonly_fields = ["id", "created_at", "updated_at"]

    def is_active_display(self, obj):
        """Display active status with color."""
        return _status_badge(obj.is_active)

    is_active_display.short_description = "Status"

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("user")


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    """Admin interface for Location model."""

    list_display = ["name", "distributor", "user", "is_active_display", "created_at"]
    list_filter = ["is_active", "distributor"]
    search_fields = ["name", "email", "user__email", "distributor__name"]
    readonly_fields = ["id", "created_at", "updated_at"]

    def is_active_display(self, obj):
        """Display active status with color."""
        return _status_badge(obj.is_active)

    is_active_display.short_description = "Status"

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("distributor", "user")


class SellerConfigInline(admin.StackedInline):
    model = SellerConfig
    can_delete = False


@admin.register(Seller)
class SellerAdmin(admin.ModelAdmin):
    """Admin interface for Seller model."""

    list_display = ["name", "location", "user", "is_active_display", "created_at"]
    list_filter = ["is_active", "location__distributor"]
    search_fields = ["name", "user__email", "location__name"]
    readonly_fields = ["id", "created_at", "updated_at"]
    inlines = [SellerConfigInline]

    def is_active_display(self, obj):
        """Display active status with color."""
        return _status_badge(obj.is_active)

    is_active_display.short_description = "Status"

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("location__distributor", "user")
