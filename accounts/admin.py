"""
Django admin configuration for accounts app.
"""

from django.contrib import admin

from accounts.infrastructure.models import UserAccount


@admin.register(UserAccount)
class UserAccountAdmin(admin.ModelAdmin):
    """Admin interface for UserAccount model. Passwords are never shown."""

    list_display = ["email", "name", "role", "is_active", "created_at"]
    list_filter = ["role", "is_active"]
    search_fields = ["email", "name"]
    readonly_fields = ["id", "created_at", "updated_at"]
    exclude = ["password"]
