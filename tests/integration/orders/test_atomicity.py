"""Integration tests for transactional behaviour of order writes.

Covers:
- A rejected reference leaves no row behind.
- A store failure after the write rolls the whole use case back.
- Store failures surface as 500 with the store's message.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from django.db import DatabaseError

from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository

pytestmark = pytest.mark.integration


class TestOrderAtomicity:
    def test_dangling_supplier_creates_nothing(self, api_client, product):
        api_client.post(
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
        assert not Order.objects.exists()

    def test_failed_reread_rolls_back_status_patch(self, api_client, order):
        with patch.object(
            OrderDjangoRepository,
            "get_by_id",
            side_effect=DatabaseError("connection lost"),
        ):
            response = api_client.patch(
                f"/api/orders/{order.pk}/status",
                {"status": "Completed"},
                format="json",
            )
        assert response.status_code == 500
        assert response.json() == {"error": "connection lost"}
        order.refresh_from_db()
        assert order.status == "Pending"

    def test_failed_save_creates_nothing(self, api_client, supplier, product):
        with patch.object(
            OrderDjangoRepository,
            "save",
            side_effect=DatabaseError("disk I/O error"),
        ):
            response = api_client.post(
                "/api/orders",
                {
                    "supplier_id": supplier.pk,
                    "product_id": product.pk,
                    "quantity": 1,
                    "subtotal": 1,
                    "total_amount": 1,
                },
                format="json",
            )
        assert response.status_code == 500
        assert response.json() == {"error": "disk I/O error"}
        assert not Order.objects.exists()
