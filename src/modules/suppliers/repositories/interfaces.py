"""Supplier repository interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.suppliers.models import Supplier


class ISupplierRepository(IRepository["Supplier"]):
    """Repository contract for the Supplier aggregate."""
