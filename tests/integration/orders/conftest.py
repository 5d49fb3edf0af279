from decimal import Decimal

import pytest

from modules.orders.models import ExportOrder, Order


@pytest.fixture()
def order(supplier, product):
    return Order.objects.create(
        supplier=supplier,
        product=product,
        quantity=5,
        subtotal=Decimal("50.00"),
        total_amount=Decimal("50.00"),
    )


@pytest.fixture()
def export_order(customer, product):
    return ExportOrder.objects.create(
        customer=customer,
        product=product,
        quantity=2,
        subtotal=Decimal("19.98"),
        total_amount=Decimal("21.98"),
        shipping_address="1 High Street, London",
    )
