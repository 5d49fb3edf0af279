"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
"""

from __future__ import annotations

from typing import List, Optional

from modules.core.repositories.django_repository import DjangoRepository
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(DjangoRepository[Product], IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    model = Product
    log_name = "product"

    def get_by_sku(self, sku: str) -> Optional[Product]:
        return Product.objects.filter(sku=sku.strip()).first()

    def list_with_categories(self) -> List[Product]:
        queryset = Product.objects.select_related("category").order_by("pk")
        return list(queryset)
