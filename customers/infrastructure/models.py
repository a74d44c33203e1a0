"""
QRCode and CustomerAccessToken models.
"""

import uuid

from django.db import models


class QRCode(models.Model):
    """A pass issued by a seller to a customer."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    code = models.CharField(max_length=64, unique=True)
    seller = models.ForeignKey(
        "partners.Seller",
        on_delete=models.CASCADE,
        related_name="qr_codes",
    )
    customer_name = models.CharField(max_length=255)
    customer_email = models.EmailField(db_index=True)
    guests = models.PositiveIntegerField()
    days = models.PositiveIntegerField()
    cost = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    expires_at = models.DateTimeField()
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = "qr_codes"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.code} ({self.customer_email})"


class CustomerAccessToken(models.Model):
    """Opaque token giving a customer read access to their QR codes."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    token = models.CharField(max_length=128, unique=True)
    qr_code = models.ForeignKey(
        QRCode,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="access_tokens",
    )
    customer_name = models.CharField(max_length=255)
    customer_email = models.EmailField(db_index=True)
    expires_at = models.DateTimeField(db_index=True)
    used_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "customer_access_tokens"
        ordering = ["-created_at"]

    def __str__(self):
        return f"Access token for {self.customer_email}"
