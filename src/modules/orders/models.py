"""Order aggregates: purchase orders and export (sales) orders.

Business rules implemented:
- Supplier / customer and product references are validated by the
  service layer before every write and backed by ``PROTECT`` foreign keys.
- ``status`` and ``shipping_status`` are independent dimensions, each
  restricted to its own closed set (``constants.py``).
- Rows are never deleted; an order ends in a terminal status value.
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone

from modules.core.models import BaseModel
from modules.orders.constants import OrderStatus, ShippingStatus


class Order(BaseModel):
    """Purchase order placed with a supplier for one product."""

    order_id = models.BigAutoField(primary_key=True)
    supplier = models.ForeignKey(
        "suppliers.Supplier",
        on_delete=models.PROTECT,
        related_name="orders",
        db_column="supplier_id",
    )
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="purchase_orders",
        db_column="product_id",
    )
    order_date = models.DateTimeField(default=timezone.now)
    quantity = models.PositiveIntegerField()
    subtotal = models.DecimalField(max_digits=12, decimal_places=2)
    total_amount = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
    )

    class Meta:
        db_table = "orders"
        ordering = ["order_id"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Order #{self.pk} - {self.status}"


class ExportOrder(BaseModel):
    """Sales order shipped to a customer for one product."""

    export_order_id = models.BigAutoField(primary_key=True)
    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="export_orders",
        db_column="customer_id",
    )
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="export_orders",
        db_column="product_id",
    )
    order_date = models.DateTimeField(default=timezone.now)
    shipping_date = models.DateField(null=True, blank=True)
    shipping_address = models.TextField()
    shipping_status = models.CharField(
        max_length=20,
        choices=ShippingStatus.choices,
        default=ShippingStatus.PENDING,
    )
    quantity = models.PositiveIntegerField()
    subtotal = models.DecimalField(max_digits=12, decimal_places=2)
    total_amount = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PENDING,
    )

    class Meta:
        db_table = "export_orders"
        ordering = ["export_order_id"]
        indexes = [
            models.Index(fields=["status"], name="export_orders_status_idx"),
            models.Index(
                fields=["shipping_status"], name="export_orders_shipping_idx"
            ),
        ]

    def __str__(self) -> str:
        return f"Export Order #{self.pk} - {self.shipping_status}/{self.status}"
