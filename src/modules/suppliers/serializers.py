"""Supplier DRF serializers for API output."""

from __future__ import annotations

from rest_framework import serializers

from modules.suppliers.models import Supplier


class SupplierSerializer(serializers.ModelSerializer):
    """Read serializer for the Supplier resource."""

    class Meta:
        model = Supplier
        fields = [
            "supplier_id",
            "supplier_name",
            "contact_name",
            "phone",
            "email",
            "address",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
