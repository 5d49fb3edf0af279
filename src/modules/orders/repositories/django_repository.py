"""Django ORM implementations of the order repositories.

Reads use ``select_related`` so the denormalized views (supplier /
customer name, product name) come from a single JOIN.  Updates lock the
row with ``select_for_update()`` (inherited ``get_for_update``).
"""

from __future__ import annotations

from django.db import models

from modules.core.repositories.django_repository import DjangoRepository
from modules.orders.models import ExportOrder, Order
from modules.orders.repositories.interfaces import (
    IExportOrderRepository,
    IOrderRepository,
)


class OrderDjangoRepository(DjangoRepository[Order], IOrderRepository):
    """Concrete purchase order repository backed by Django ORM."""

    model = Order
    log_name = "order"

    def get_queryset(self) -> models.QuerySet:
        return Order.objects.select_related("supplier", "product")

    def queryset(self) -> models.QuerySet:
        return self.get_queryset().order_by("pk")


class ExportOrderDjangoRepository(
    DjangoRepository[ExportOrder], IExportOrderRepository
):
    """Concrete export order repository backed by Django ORM."""

    model = ExportOrder
    log_name = "export_order"

    def get_queryset(self) -> models.QuerySet:
        return ExportOrder.objects.select_related("customer", "product")

    def queryset(self) -> models.QuerySet:
        return self.get_queryset().order_by("pk")
