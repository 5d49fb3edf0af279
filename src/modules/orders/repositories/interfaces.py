"""Order repository interfaces.

Extend ``IRepository`` with the joined queryset behind the list view
(supplier/customer and product names loaded in one query).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from django.db import models

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import ExportOrder, Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for purchase orders."""

    @abstractmethod
    def queryset(self) -> "models.QuerySet[Order]":
        """All orders joined to supplier and product, in primary key order."""


class IExportOrderRepository(IRepository["ExportOrder"]):
    """Repository contract for export orders."""

    @abstractmethod
    def queryset(self) -> "models.QuerySet[ExportOrder]":
        """All export orders joined to customer and product, in primary key order."""
