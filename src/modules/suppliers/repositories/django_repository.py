"""Django ORM implementation of the Supplier repository."""

from __future__ import annotations

from modules.core.repositories.django_repository import DjangoRepository
from modules.suppliers.models import Supplier
from modules.suppliers.repositories.interfaces import ISupplierRepository


class SupplierDjangoRepository(DjangoRepository[Supplier], ISupplierRepository):
    """Concrete Supplier repository backed by Django ORM."""

    model = Supplier
    log_name = "supplier"
