"""Integration tests for Category API endpoints.

Covers:
- CRUD operations via /api/categories (with and without trailing slash).
- Activation toggle via PATCH /api/categories/{id}/status.
- Error mapping (400, 404).
"""

from __future__ import annotations

import pytest

from modules.categories.models import Category

pytestmark = pytest.mark.integration


# ===========================================================================
# LIST / RETRIEVE
# ===========================================================================


class TestCategoryRead:
    def test_list_empty(self, api_client):
        response = api_client.get("/api/categories")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_in_id_order(self, api_client):
        first = Category.objects.create(category_name="B")
        second = Category.objects.create(category_name="A")
        response = api_client.get("/api/categories/")
        ids = [row["category_id"] for row in response.json()]
        assert ids == [first.pk, second.pk]

    def test_retrieve(self, api_client, category):
        response = api_client.get(f"/api/categories/{category.pk}")
        assert response.status_code == 200
        assert response.json()["category_name"] == "Electronics"

    def test_retrieve_not_found(self, api_client):
        response = api_client.get("/api/categories/999999")
        assert response.status_code == 404
        assert response.json() == {"error": "Category not found"}

    def test_retrieve_malformed_id(self, api_client):
        response = api_client.get("/api/categories/abc")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid ID format"}


# ===========================================================================
# CREATE / UPDATE
# ===========================================================================


class TestCategoryWrite:
    def test_create(self, api_client):
        response = api_client.post(
            "/api/categories",
            {"category_name": "Tools", "description": "Hand tools"},
            format="json",
        )
        assert response.status_code == 201
        data = response.json()
        assert data["category_name"] == "Tools"
        assert data["is_active"] is True
        assert Category.objects.filter(pk=data["category_id"]).exists()

    def test_create_missing_name(self, api_client):
        response = api_client.post(
            "/api/categories", {"description": "no name"}, format="json"
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields: category_name"}
        assert Category.objects.count() == 0

    def test_update(self, api_client, category):
        response = api_client.put(
            f"/api/categories/{category.pk}",
            {"category_name": "Gadgets"},
            format="json",
        )
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Category updated successfully"
        assert data["category"]["category_name"] == "Gadgets"
        assert data["category"]["description"] == ""

    def test_update_not_found(self, api_client):
        response = api_client.put(
            "/api/categories/999999", {"category_name": "Gadgets"}, format="json"
        )
        assert response.status_code == 404


# ===========================================================================
# STATUS
# ===========================================================================


class TestCategoryStatus:
    def test_deactivate(self, api_client, category):
        response = api_client.patch(
            f"/api/categories/{category.pk}/status",
            {"is_active": False},
            format="json",
        )
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Category status updated successfully to inactive"
        assert data["category"]["is_active"] is False
        category.refresh_from_db()
        assert category.is_active is False

    @pytest.mark.parametrize("body", [{}, {"is_active": "false"}, {"is_active": 0}])
    def test_non_boolean_rejected(self, api_client, category, body):
        response = api_client.patch(
            f"/api/categories/{category.pk}/status", body, format="json"
        )
        assert response.status_code == 400
        assert response.json() == {
            "error": "Invalid is_active value. Must be true or false"
        }
        category.refresh_from_db()
        assert category.is_active is True

    def test_not_found(self, api_client):
        response = api_client.patch(
            "/api/categories/999999/status", {"is_active": True}, format="json"
        )
        assert response.status_code == 404
        assert response.json() == {"error": "Category not found"}
