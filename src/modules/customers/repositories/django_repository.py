"""Django ORM implementation of the Customer repository."""

from __future__ import annotations

from modules.core.repositories.django_repository import DjangoRepository
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository


class CustomerDjangoRepository(DjangoRepository[Customer], ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    model = Customer
    log_name = "customer"
