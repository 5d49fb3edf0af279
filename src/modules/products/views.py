"""Product API views.

Exposes the ``ProductService`` via HTTP using DRF ViewSets.  The shared
list / retrieve / create / update / status routes come from
``MasterDataViewSet``; this module adds the category-joined listing.
"""

from __future__ import annotations

from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response

from modules.categories.repositories.django_repository import (
    CategoryDjangoRepository,
)
from modules.core.references import EntityKind, ReferenceValidator
from modules.core.viewsets import MasterDataViewSet
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    ProductSerializer,
    ProductWithCategorySerializer,
)
from modules.products.services import ProductService


class ProductViewSet(MasterDataViewSet):
    """ViewSet for Product operations (``/api/products``).

    Uses ``ProductService`` with ``ProductDjangoRepository`` and a
    category-aware ``ReferenceValidator`` (DIP).
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    create_dto = CreateProductDTO
    update_dto = UpdateProductDTO
    entity_key = "product"

    def build_service(self) -> ProductService:
        return ProductService(
            repository=ProductDjangoRepository(),
            references=ReferenceValidator(
                {EntityKind.CATEGORY: CategoryDjangoRepository()}
            ),
        )

    @action(
        detail=False,
        methods=["get"],
        url_path="with-categories",
        serializer_class=ProductWithCategorySerializer,
    )
    def with_categories(self, request: Request) -> Response:
        """GET /api/products/with-categories"""
        products = self._service.list_with_categories()
        serializer = ProductWithCategorySerializer(products, many=True)
        return Response(serializer.data)
