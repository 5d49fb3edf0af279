"""Supplier service layer (Use Cases)."""

from __future__ import annotations

from modules.core.services import MasterDataService
from modules.suppliers.exceptions import SupplierNotFound
from modules.suppliers.models import Supplier


class SupplierService(MasterDataService[Supplier]):
    """Application service for Supplier use-cases.

    Receives an ``ISupplierRepository`` via constructor injection (DIP).
    """

    model = Supplier
    label = "Supplier"
    log_name = "supplier"
    not_found = SupplierNotFound
