"""Supplier model.

Suppliers are the counterpart of purchase orders.  ``supplier_name``
and ``phone`` are mandatory; the remaining contact data is free-form.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import MasterDataModel


class Supplier(MasterDataModel):
    """Supplier aggregate root."""

    supplier_id = models.BigAutoField(primary_key=True)
    supplier_name = models.CharField(max_length=255)
    contact_name = models.CharField(max_length=255, blank=True, default="")
    phone = models.CharField(max_length=32)
    email = models.EmailField(max_length=254, null=True, blank=True)
    address = models.TextField(blank=True, default="")

    class Meta:
        db_table = "suppliers"
        ordering = ["supplier_id"]
        indexes = [
            models.Index(fields=["is_active"], name="suppliers_active_idx"),
        ]

    def __str__(self) -> str:
        return self.supplier_name
