"""Order DRF serializers for API output.

Input is validated by the Pydantic DTOs in ``dtos.py``.  Two shapes per
aggregate:

- *view* serializers (list / retrieve): denormalized with the supplier or
  customer name and the product name, plus ``updated_at``.
- *row* serializers (create / update / status patch): every column of the
  table, foreign keys as ``<entity>_id``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.models import ExportOrder, Order

# ---------------------------------------------------------------------------
# Purchase orders
# ---------------------------------------------------------------------------


class OrderViewSerializer(serializers.ModelSerializer):
    """Order joined with supplier and product names."""

    supplier_name = serializers.CharField(
        source="supplier.supplier_name", read_only=True
    )
    product_name = serializers.CharField(source="product.product_name", read_only=True)

    class Meta:
        model = Order
        fields = [
            "order_id",
            "supplier_id",
            "supplier_name",
            "product_id",
            "product_name",
            "order_date",
            "quantity",
            "subtotal",
            "total_amount",
            "status",
            "updated_at",
        ]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Raw order row."""

    class Meta:
        model = Order
        fields = [
            "order_id",
            "supplier_id",
            "product_id",
            "order_date",
            "quantity",
            "subtotal",
            "total_amount",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


# ---------------------------------------------------------------------------
# Export orders
# ---------------------------------------------------------------------------


class ExportOrderViewSerializer(serializers.ModelSerializer):
    """Export order joined with customer and product names."""

    customer_name = serializers.CharField(
        source="customer.customer_name", read_only=True
    )
    product_name = serializers.CharField(source="product.product_name", read_only=True)

    class Meta:
        model = ExportOrder
        fields = [
            "export_order_id",
            "customer_id",
            "customer_name",
            "product_id",
            "product_name",
            "order_date",
            "shipping_date",
            "shipping_address",
            "shipping_status",
            "quantity",
            "subtotal",
            "total_amount",
            "status",
            "updated_at",
        ]
        read_only_fields = fields


class ExportOrderSerializer(serializers.ModelSerializer):
    """Raw export order row."""

    class Meta:
        model = ExportOrder
        fields = [
            "export_order_id",
            "customer_id",
            "product_id",
            "order_date",
            "shipping_date",
            "shipping_address",
            "shipping_status",
            "quantity",
            "subtotal",
            "total_amount",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
