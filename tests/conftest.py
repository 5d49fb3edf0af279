from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.categories.models import Category
from modules.customers.models import Customer
from modules.products.models import Product
from modules.suppliers.models import Supplier


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


# ---------------------------------------------------------------------------
# Persisted master data
# ---------------------------------------------------------------------------


@pytest.fixture()
def category():
    return Category.objects.create(
        category_name="Electronics", description="Devices and accessories"
    )


@pytest.fixture()
def product(category):
    return Product.objects.create(
        product_name="USB Cable",
        sku="USB-001",
        category=category,
        quantity=10,
        unit_price=Decimal("9.99"),
    )


@pytest.fixture()
def supplier():
    return Supplier.objects.create(
        supplier_name="Acme Components",
        contact_name="Alice Moore",
        phone="+1-555-0100",
        email="alice@acme.example",
    )


@pytest.fixture()
def customer():
    return Customer.objects.create(
        customer_name="Northwind Retail",
        phone="+44-20-7946-0000",
        address="1 High Street, London",
    )
