"""Product model with SKU uniqueness and stock quantity.

Business rules implemented:
- SKU must be unique in the system.
- Quantity and unit price cannot be negative (validated by DTO, backed by
  the column types and model validators).
- A product belongs to an existing category (``PROTECT`` foreign key,
  checked beforehand by the Reference Validator).
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import MasterDataModel


class Product(MasterDataModel):
    """Product aggregate root."""

    product_id = models.BigAutoField(primary_key=True)
    product_name = models.CharField(max_length=255)
    sku = models.CharField(max_length=64, unique=True)
    category = models.ForeignKey(
        "categories.Category",
        on_delete=models.PROTECT,
        related_name="products",
        db_column="category_id",
    )
    description = models.TextField(blank=True, default="")
    quantity = models.PositiveIntegerField(default=0)
    unit_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )

    class Meta:
        db_table = "products"
        ordering = ["product_id"]

    def __str__(self) -> str:
        return f"{self.sku} - {self.product_name}"
