"""Supplier API views."""

from __future__ import annotations

from modules.core.viewsets import MasterDataViewSet
from modules.suppliers.dtos import CreateSupplierDTO, UpdateSupplierDTO
from modules.suppliers.models import Supplier
from modules.suppliers.repositories.django_repository import SupplierDjangoRepository
from modules.suppliers.serializers import SupplierSerializer
from modules.suppliers.services import SupplierService


class SupplierViewSet(MasterDataViewSet):
    """ViewSet for Supplier operations (``/api/supplier``, ``/api/suppliers``).

    Uses ``SupplierService`` with ``SupplierDjangoRepository`` (DIP).
    """

    queryset = Supplier.objects.all()
    serializer_class = SupplierSerializer
    create_dto = CreateSupplierDTO
    update_dto = UpdateSupplierDTO
    entity_key = "supplier"

    def build_service(self) -> SupplierService:
        return SupplierService(repository=SupplierDjangoRepository())
