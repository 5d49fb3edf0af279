"""Customer service layer (Use Cases)."""

from __future__ import annotations

from modules.core.services import MasterDataService
from modules.customers.exceptions import CustomerNotFound
from modules.customers.models import Customer


class CustomerService(MasterDataService[Customer]):
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    model = Customer
    label = "Customer"
    log_name = "customer"
    not_found = CustomerNotFound
