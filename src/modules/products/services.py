"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- SKU must be unique.
- ``category_id`` must reference an existing category, on create and
  on update.
- Quantity and unit price cannot be negative (validated by DTO).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.core.references import EntityKind
from modules.core.services import MasterDataService
from modules.products.exceptions import ProductAlreadyExists, ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService(MasterDataService[Product]):
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` and a ``ReferenceValidator`` able to
    resolve categories via constructor injection (DIP).
    """

    model = Product
    label = "Product"
    log_name = "product"
    not_found = ProductNotFound

    _repo: IProductRepository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_with_categories(self) -> List[Product]:
        return self._repo.list_with_categories()

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def _check(
        self,
        dto: CreateProductDTO | UpdateProductDTO,
        current: Optional[Product] = None,
    ) -> None:
        """Validate the category reference and SKU uniqueness.

        Raises:
            InvalidReference: if ``category_id`` does not exist.
            ProductAlreadyExists: if another product already uses the SKU.
        """
        self._references.require(EntityKind.CATEGORY, dto.category_id)

        holder = self._repo.get_by_sku(dto.sku)
        if holder is not None and (current is None or holder.pk != current.pk):
            logger.warning("product.duplicate_sku", sku=dto.sku)
            raise ProductAlreadyExists(f"SKU '{dto.sku}' already registered")
