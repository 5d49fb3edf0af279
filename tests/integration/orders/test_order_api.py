"""Integration tests for purchase order endpoints.

Covers:
- Creation via POST /api/orders (raw row, Pending default).
- List / retrieve via GET /api/orders (joined names, filters).
- Full update via PUT /api/orders/{id}.
- Status patch via PATCH /api/orders/{id}/status.
- Error mapping (400 dangling references, invalid status, 404).
"""

from __future__ import annotations

import pytest

from modules.orders.constants import OrderStatus
from modules.orders.models import Order

pytestmark = pytest.mark.integration


def _payload(supplier, product, **overrides):
    data = {
        "supplier_id": supplier.pk,
        "product_id": product.pk,
        "quantity": 5,
        "subtotal": 50,
        "total_amount": 50,
    }
    data.update(overrides)
    return data


# ===========================================================================
# CREATE
# ===========================================================================


class TestOrderCreate:
    def test_create_defaults_to_pending(self, api_client, supplier, product):
        response = api_client.post(
            "/api/orders", _payload(supplier, product), format="json"
        )
        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "Pending"
        assert data["supplier_id"] == supplier.pk
        assert data["subtotal"] == "50.00"
        assert "supplier_name" not in data
        assert "created_at" in data

    def test_create_with_explicit_status(self, api_client, supplier, product):
        response = api_client.post(
            "/api/orders/",
            _payload(supplier, product, status="Cancelled"),
            format="json",
        )
        assert response.status_code == 201
        assert response.json()["status"] == "Cancelled"

    def test_missing_fields(self, api_client, supplier):
        response = api_client.post(
            "/api/orders", {"supplier_id": supplier.pk}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["error"].startswith("Missing required fields: ")
        assert Order.objects.count() == 0

    def test_dangling_supplier(self, api_client, product):
        response = api_client.post(
            "/api/orders",
            {
                "supplier_id": 999999,
                "product_id": product.pk,
                "quantity": 1,
                "subtotal": 1,
                "total_amount": 1,
            },
            format="json",
        )
        assert response.status_code == 400
        assert response.json() == {
            "error": "Invalid supplier_id. Supplier does not exist"
        }
        assert Order.objects.count() == 0

    def test_dangling_product(self, api_client, supplier, product):
        response = api_client.post(
            "/api/orders",
            _payload(supplier, product, product_id=999999),
            format="json",
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid product_id. Product does not exist"}

    def test_invalid_status(self, api_client, supplier, product):
        response = api_client.post(
            "/api/orders", _payload(supplier, product, status="Shipped"), format="json"
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid status value"}

    def test_zero_quantity(self, api_client, supplier, product):
        response = api_client.post(
            "/api/orders", _payload(supplier, product, quantity=0), format="json"
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Quantity must be at least 1"}

    @pytest.mark.parametrize("field", ["supplier_id", "product_id", "quantity"])
    def test_boolean_for_integer_field(self, api_client, supplier, product, field):
        response = api_client.post(
            "/api/orders", _payload(supplier, product, **{field: True}), format="json"
        )
        assert response.status_code == 400
        assert response.json()["error"].startswith(f"Invalid {field}: ")
        assert Order.objects.count() == 0


# ===========================================================================
# LIST / RETRIEVE
# ===========================================================================


class TestOrderRead:
    def test_list_joined(self, api_client, order):
        response = api_client.get("/api/orders")
        assert response.status_code == 200
        row = response.json()[0]
        assert row["order_id"] == order.pk
        assert row["supplier_name"] == "Acme Components"
        assert row["product_name"] == "USB Cable"
        assert "created_at" not in row

    def test_retrieve(self, api_client, order):
        response = api_client.get(f"/api/orders/{order.pk}")
        assert response.status_code == 200
        assert response.json()["supplier_name"] == "Acme Components"

    def test_retrieve_not_found(self, api_client):
        response = api_client.get("/api/orders/999999")
        assert response.status_code == 404
        assert response.json() == {"error": "Order not found"}

    @pytest.mark.parametrize("bad_id", ["abc", "0", "-1"])
    def test_retrieve_malformed_id(self, api_client, bad_id):
        response = api_client.get(f"/api/orders/{bad_id}")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid ID format"}

    def test_filter_by_status(self, api_client, order, supplier, product):
        Order.objects.create(
            supplier=supplier,
            product=product,
            quantity=1,
            subtotal=1,
            total_amount=1,
            status=OrderStatus.COMPLETED,
        )
        response = api_client.get("/api/orders?status=Completed")
        statuses = [row["status"] for row in response.json()]
        assert statuses == ["Completed"]

    def test_filter_by_supplier(self, api_client, order):
        response = api_client.get(f"/api/orders?supplier={order.supplier_id + 1}")
        assert response.json() == []


# ===========================================================================
# UPDATE
# ===========================================================================


class TestOrderUpdate:
    def test_update_replaces_fields_and_keeps_status(
        self, api_client, order, supplier, product
    ):
        Order.objects.filter(pk=order.pk).update(status=OrderStatus.COMPLETED)
        response = api_client.put(
            f"/api/orders/{order.pk}",
            _payload(supplier, product, quantity=7, total_amount="70.00"),
            format="json",
        )
        assert response.status_code == 200
        data = response.json()
        assert data["quantity"] == 7
        assert data["total_amount"] == "70.00"
        assert data["status"] == "Completed"

    def test_update_not_found(self, api_client, supplier, product):
        response = api_client.put(
            "/api/orders/999999", _payload(supplier, product), format="json"
        )
        assert response.status_code == 404

    def test_update_dangling_reference_leaves_row(self, api_client, order, product):
        response = api_client.put(
            f"/api/orders/{order.pk}",
            {
                "supplier_id": 999999,
                "product_id": product.pk,
                "quantity": 9,
                "subtotal": 9,
                "total_amount": 9,
            },
            format="json",
        )
        assert response.status_code == 400
        order.refresh_from_db()
        assert order.quantity == 5


# ===========================================================================
# STATUS
# ===========================================================================


class TestOrderStatus:
    def test_complete(self, api_client, order):
        response = api_client.patch(
            f"/api/orders/{order.pk}/status", {"status": "Completed"}, format="json"
        )
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Order status updated successfully to Completed"
        assert data["order"]["status"] == "Completed"
        order.refresh_from_db()
        assert order.status == "Completed"

    def test_no_status(self, api_client, order):
        response = api_client.patch(
            f"/api/orders/{order.pk}/status", {}, format="json"
        )
        assert response.status_code == 400
        assert response.json() == {"error": "No status provided to update"}

    def test_invalid_status(self, api_client, order):
        response = api_client.patch(
            f"/api/orders/{order.pk}/status", {"status": "Done"}, format="json"
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid status value"}
        order.refresh_from_db()
        assert order.status == "Pending"

    def test_invalid_status_reported_before_not_found(self, api_client):
        response = api_client.patch(
            "/api/orders/999999/status", {"status": "Done"}, format="json"
        )
        assert response.status_code == 400

    def test_not_found(self, api_client):
        response = api_client.patch(
            "/api/orders/999999/status", {"status": "Completed"}, format="json"
        )
        assert response.status_code == 404
        assert response.json() == {"error": "Order not found"}

    def test_terminal_status_may_change_again(self, api_client, order):
        for value in ("Cancelled", "Pending"):
            response = api_client.patch(
                f"/api/orders/{order.pk}/status", {"status": value}, format="json"
            )
            assert response.status_code == 200
        order.refresh_from_db()
        assert order.status == "Pending"

    def test_reads_are_repeatable(self, api_client, order):
        first = api_client.get(f"/api/orders/{order.pk}").json()
        second = api_client.get(f"/api/orders/{order.pk}").json()
        assert first == second
