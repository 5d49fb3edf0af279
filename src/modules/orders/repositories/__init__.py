"""Order repositories package."""

from modules.orders.repositories.django_repository import (
    ExportOrderDjangoRepository,
    OrderDjangoRepository,
)
from modules.orders.repositories.interfaces import (
    IExportOrderRepository,
    IOrderRepository,
)

__all__ = [
    "ExportOrderDjangoRepository",
    "IExportOrderRepository",
    "IOrderRepository",
    "OrderDjangoRepository",
]
