"""
Distributor, Location, Seller and SellerConfig models.
"""

import uuid

from django.db import models


class Distributor(models.Model):
    """
    Root of the partner hierarchy.
    Owns locations; its active flag gates their activation.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    is_active = models.BooleanField(default=True, db_index=True)
    user = models.OneToOneField(
        "accounts.UserAccount",
        on_delete=models.PROTECT,
        related_name="distributor",
    )
    contact_person = models.CharField(max_length=255, null=True, blank=True)
    email = models.EmailField(null=True, blank=True, help_text="Contact email")
    alternative_email = models.EmailField(null=True, blank=True)
    telephone = models.CharField(max_length=50, null=True, blank=True)
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "distributors"
        ordering = ["name"]

    def __str__(self):
        return self.name


class Location(models.Model):
    """
    A venue belonging to a distributor.
    Owns sellers; cannot be activated while its distributor is inactive.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    distributor = models.ForeignKey(
        Distributor, on_delete=models.CASCADE, related_name="locations"
    )
    name = models.CharField(max_length=255)
    is_active = models.BooleanField(default=True, db_index=True)
    user = models.OneToOneField(
        "accounts.UserAccount",
        on_delete=models.PROTECT,
        related_name="location",
    )
    contact_person = models.CharField(max_length=255, null=True, blank=True)
    email = models.EmailField(null=True, blank=True, help_text="Contact email")
    telephone = models.CharField(max_length=50, null=True, blank=True)
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "locations"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["distributor", "is_active"]),
        ]

    def __str__(self):
        return f"{self.name} ({self.distributor.name})"


class Seller(models.Model):
    """
    A seller issuing QR codes at a location.
    Cannot be activated while its location or distributor is inactive.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    location = models.ForeignKey(Location, on_delete=models.CASCADE, related_name="sellers")
    name = models.CharField(max_length=255)
    is_active = models.BooleanField(default=True, db_index=True)
    user = models.OneToOneField(
        "accounts.UserAccount",
        on_delete=models.PROTECT,
        related_name="seller",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "sellers"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["location", "is_active"]),
        ]

    def __str__(self):
        return self.name


class SellerConfig(models.Model):
    """QR issuing configuration of a seller."""

    SEND_METHOD_CHOICES = [
        ("URL", "URL"),
        ("APP", "App"),
    ]
    PRICING_TYPE_CHOICES = [
        ("FIXED", "Fixed"),
        ("VARIABLE", "Variable"),
        ("FREE", "Free"),
    ]

    seller = models.OneToOneField(
        Seller,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name="config",
    )
    send_method = models.CharField(max_length=10, choices=SEND_METHOD_CHOICES, default="URL")
    landing_page_required = models.BooleanField(default=True)
    allow_custom_guests_days = models.BooleanField(default=False)
    default_guests = models.PositiveIntegerField(default=2)
    default_days = models.PositiveIntegerField(default=3)
    pricing_type = models.CharField(max_length=10, choices=PRICING_TYPE_CHOICES, default="FIXED")
    fixed_price = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    send_rebuy_email = models.BooleanField(default=False)

    class Meta:
        db_table = "seller_configs"

    def __str__(self):
        return f"Config for {self.seller.name}"
