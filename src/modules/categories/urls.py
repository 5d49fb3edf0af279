"""Category URL configuration."""

from __future__ import annotations

from modules.categories.views import CategoryViewSet
from modules.core.routers import OptionalSlashRouter

router = OptionalSlashRouter()
router.register("categories", CategoryViewSet, basename="category")

urlpatterns = router.urls
