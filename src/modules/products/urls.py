"""Product URL configuration."""

from __future__ import annotations

from modules.core.routers import OptionalSlashRouter
from modules.products.views import ProductViewSet

router = OptionalSlashRouter()
router.register("products", ProductViewSet, basename="product")

urlpatterns = router.urls
