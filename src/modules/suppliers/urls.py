"""Supplier URL configuration.

Mounted under both the singular ``supplier`` prefix used by existing
clients and the plural ``suppliers`` used by every other resource.
"""

from __future__ import annotations

from modules.core.routers import OptionalSlashRouter
from modules.suppliers.views import SupplierViewSet

router = OptionalSlashRouter()
router.register("supplier", SupplierViewSet, basename="supplier")
router.register("suppliers", SupplierViewSet, basename="suppliers")

urlpatterns = router.urls
