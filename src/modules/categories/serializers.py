"""Category DRF serializers (output only; input goes through DTOs)."""

from __future__ import annotations

from rest_framework import serializers

from modules.categories.models import Category


class CategorySerializer(serializers.ModelSerializer):
    """Read serializer for the Category resource."""

    class Meta:
        model = Category
        fields = [
            "category_id",
            "category_name",
            "description",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
