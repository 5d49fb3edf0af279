"""Product DRF serializers for API output.

Input is validated by the Pydantic DTOs in ``dtos.py``; these serializers
only shape rows for responses.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Raw product row, foreign key rendered as ``category_id``."""

    class Meta:
        model = Product
        fields = [
            "product_id",
            "product_name",
            "sku",
            "category_id",
            "description",
            "quantity",
            "unit_price",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProductWithCategorySerializer(serializers.ModelSerializer):
    """Product joined with its category name; price fixed to 2 decimals."""

    category_name = serializers.CharField(
        source="category.category_name", read_only=True
    )
    unit_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, read_only=True
    )

    class Meta:
        model = Product
        fields = [
            "product_id",
            "product_name",
            "sku",
            "category_name",
            "description",
            "quantity",
            "unit_price",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
