"""Category service layer (Use Cases)."""

from __future__ import annotations

from modules.categories.exceptions import CategoryNotFound
from modules.categories.models import Category
from modules.core.services import MasterDataService


class CategoryService(MasterDataService[Category]):
    """Application service for Category use-cases."""

    model = Category
    label = "Category"
    log_name = "category"
    not_found = CategoryNotFound
