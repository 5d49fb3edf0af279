"""Customer model.

Customers are the counterpart of export (sales) orders.  ``customer_name``
and ``phone`` are mandatory; the remaining contact data is free-form.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import MasterDataModel


class Customer(MasterDataModel):
    """Customer aggregate root."""

    customer_id = models.BigAutoField(primary_key=True)
    customer_name = models.CharField(max_length=255)
    contact_name = models.CharField(max_length=255, blank=True, default="")
    phone = models.CharField(max_length=32)
    email = models.EmailField(max_length=254, null=True, blank=True)
    address = models.TextField(blank=True, default="")

    class Meta:
        db_table = "customers"
        ordering = ["customer_id"]
        indexes = [
            models.Index(fields=["is_active"], name="customers_active_idx"),
        ]

    def __str__(self) -> str:
        return self.customer_name
