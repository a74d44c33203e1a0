"""
Account Django ORM model.

This is the infrastructure layer model for accounts.
Domain entities are in accounts.domain.account.
"""

import uuid

from django.db import models


class UserAccount(models.Model):
    """
    Login credentials and role claim of an admin, distributor,
    location or seller user.
    """

    ROLE_CHOICES = [
        ("ADMIN", "Admin"),
        ("DISTRIBUTOR", "Distributor"),
        ("LOCATION", "Location"),
        ("SELLER", "Seller"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, blank=True, default="")
    email = models.EmailField(unique=True)
    password = models.CharField(max_length=255, help_text="Hashed password")
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, db_index=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "user_accounts"
        ordering = ["email"]

    def save(self, *args, **kwargs):
        """Store emails lower-cased so lookups are case-insensitive."""
        self.email = (self.email or "").strip().lower()
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.email} ({self.role})"
