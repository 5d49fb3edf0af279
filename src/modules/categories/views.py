"""Category API views."""

from __future__ import annotations

from modules.categories.dtos import CreateCategoryDTO, UpdateCategoryDTO
from modules.categories.models import Category
from modules.categories.repositories.django_repository import (
    CategoryDjangoRepository,
)
from modules.categories.serializers import CategorySerializer
from modules.categories.services import CategoryService
from modules.core.viewsets import MasterDataViewSet


class CategoryViewSet(MasterDataViewSet):
    """ViewSet for Category operations (``/api/categories``)."""

    queryset = Category.objects.all()
    serializer_class = CategorySerializer
    create_dto = CreateCategoryDTO
    update_dto = UpdateCategoryDTO
    entity_key = "category"

    def build_service(self) -> CategoryService:
        return CategoryService(repository=CategoryDjangoRepository())
