"""Customer API views."""

from __future__ import annotations

from modules.core.viewsets import MasterDataViewSet
from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CustomerSerializer
from modules.customers.services import CustomerService


class CustomerViewSet(MasterDataViewSet):
    """ViewSet for Customer operations (``/api/customers``).

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    """

    queryset = Customer.objects.all()
    serializer_class = CustomerSerializer
    create_dto = CreateCustomerDTO
    update_dto = UpdateCustomerDTO
    entity_key = "customer"

    def build_service(self) -> CustomerService:
        return CustomerService(repository=CustomerDjangoRepository())
