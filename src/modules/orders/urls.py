"""Order URL configuration."""

from __future__ import annotations

from modules.core.routers import OptionalSlashRouter
from modules.orders.views import ExportOrderViewSet, OrderViewSet

router = OptionalSlashRouter()
router.register("orders", OrderViewSet, basename="order")
router.register("export-orders", ExportOrderViewSet, basename="export-order")

urlpatterns = router.urls
