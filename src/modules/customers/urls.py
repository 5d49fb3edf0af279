"""Customer URL configuration."""

from __future__ import annotations

from modules.core.routers import OptionalSlashRouter
from modules.customers.views import CustomerViewSet

router = OptionalSlashRouter()
router.register("customers", CustomerViewSet, basename="customer")

urlpatterns = router.urls
