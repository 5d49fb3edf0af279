"""Product repository interface.

Extends ``IRepository[Product]`` with the SKU look-up used by the
uniqueness rule and the category-joined listing.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_by_sku(self, sku: str) -> Optional["Product"]:
        """Retrieve a product by SKU."""

    @abstractmethod
    def list_with_categories(self) -> List["Product"]:
        """List products with their category loaded in the same query.

        Products whose category row is missing are left out (inner join).
        """
