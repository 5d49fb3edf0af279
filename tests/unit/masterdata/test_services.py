"""Unit tests for the category, supplier and customer services.

All three are ``MasterDataService`` subclasses; these tests pin the
per-entity labels, not-found errors and the shared write paths.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from modules.categories.dtos import CreateCategoryDTO, UpdateCategoryDTO
from modules.categories.exceptions import CategoryNotFound
from modules.categories.models import Category
from modules.categories.services import CategoryService
from modules.customers.exceptions import CustomerNotFound
from modules.customers.services import CustomerService
from modules.suppliers.dtos import CreateSupplierDTO, UpdateSupplierDTO
from modules.suppliers.exceptions import SupplierNotFound
from modules.suppliers.models import Supplier
from modules.suppliers.services import SupplierService

pytestmark = pytest.mark.unit


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.save.side_effect = lambda entity, update_fields=None: entity
    return repo


# ===========================================================================
# Not found
# ===========================================================================


@pytest.mark.parametrize(
    "service_class, error, message",
    [
        (CategoryService, CategoryNotFound, "Category not found"),
        (SupplierService, SupplierNotFound, "Supplier not found"),
        (CustomerService, CustomerNotFound, "Customer not found"),
    ],
)
class TestNotFound:
    def test_get(self, mock_repo, service_class, error, message):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(error) as exc_info:
            service_class(repository=mock_repo).get(10)
        assert exc_info.value.message == message

    def test_set_active(self, mock_repo, service_class, error, message):
        mock_repo.get_for_update.return_value = None
        with pytest.raises(error):
            service_class(repository=mock_repo).set_active(10, True)


# ===========================================================================
# Category
# ===========================================================================


class TestCategoryService:
    def test_create(self, mock_repo):
        service = CategoryService(repository=mock_repo)
        service.create(CreateCategoryDTO(category_name="Tools", description="Hand"))

        saved = mock_repo.save.call_args.args[0]
        assert isinstance(saved, Category)
        assert saved.category_name == "Tools"
        assert saved.description == "Hand"

    def test_update_clears_omitted_description(self, mock_repo):
        existing = Category(category_id=1, category_name="Tools", description="Hand")
        mock_repo.get_for_update.return_value = existing

        CategoryService(repository=mock_repo).update(
            "1", UpdateCategoryDTO(category_name="Power tools")
        )

        assert existing.category_name == "Power tools"
        assert existing.description == ""

    def test_list_delegates(self, mock_repo):
        mock_repo.list.return_value = []
        assert CategoryService(repository=mock_repo).list_all() == []
        mock_repo.list.assert_called_once_with(None)


# ===========================================================================
# Supplier
# ===========================================================================


class TestSupplierService:
    def test_create_passes_contact_fields(self, mock_repo):
        SupplierService(repository=mock_repo).create(
            CreateSupplierDTO(
                supplier_name="Acme",
                phone="555",
                contact_name="Alice",
                email="alice@acme.example",
            )
        )
        saved = mock_repo.save.call_args.args[0]
        assert isinstance(saved, Supplier)
        assert saved.contact_name == "Alice"
        assert saved.email == "alice@acme.example"

    def test_update_replaces_every_field(self, mock_repo):
        existing = Supplier(
            supplier_id=3,
            supplier_name="Acme",
            phone="555",
            email="a@b.co",
            address="Dock 4",
            is_active=False,
        )
        mock_repo.get_for_update.return_value = existing

        SupplierService(repository=mock_repo).update(
            3, UpdateSupplierDTO(supplier_name="Acme Ltd", phone="556")
        )

        assert existing.supplier_name == "Acme Ltd"
        assert existing.phone == "556"
        assert existing.email is None
        assert existing.address == ""
        assert existing.is_active is False

    def test_reactivate(self, mock_repo):
        existing = Supplier(supplier_id=3, supplier_name="Acme", is_active=False)
        mock_repo.get_for_update.return_value = existing

        SupplierService(repository=mock_repo).set_active(3, True)

        assert existing.is_active is True
        mock_repo.save.assert_called_once_with(existing, update_fields=["is_active"])
