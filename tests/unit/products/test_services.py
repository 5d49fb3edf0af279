"""Unit tests for ProductService.

Covers:
- create: happy path, dangling category, duplicate SKU.
- update: happy path, own SKU allowed, not found, optional fields kept.
- get: happy path, not found, malformed id.
- set_active: boolean only, update_fields restricted.
- list_with_categories: delegation to repository.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.core.exceptions import InvalidInput, InvalidReference, InvalidStatusValue
from modules.core.references import EntityKind, ReferenceValidator
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductAlreadyExists, ProductNotFound
from modules.products.models import Product
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.get_by_sku.return_value = None
    repo.save.side_effect = lambda entity, update_fields=None: entity
    return repo


@pytest.fixture()
def category_repo():
    repo = MagicMock()
    repo.exists.return_value = True
    return repo


@pytest.fixture()
def service(mock_repo, category_repo):
    return ProductService(
        repository=mock_repo,
        references=ReferenceValidator({EntityKind.CATEGORY: category_repo}),
    )


def _create_dto(**overrides) -> CreateProductDTO:
    data = {
        "product_name": "USB Cable",
        "sku": "USB-001",
        "category_id": 1,
        "quantity": 10,
        "unit_price": Decimal("9.99"),
    }
    data.update(overrides)
    return CreateProductDTO(**data)


def _update_dto(**overrides) -> UpdateProductDTO:
    data = {
        "product_name": "USB-C Cable",
        "sku": "USB-001",
        "category_id": 1,
        "quantity": 25,
        "unit_price": Decimal("12.50"),
    }
    data.update(overrides)
    return UpdateProductDTO(**data)


def _product(pk: int = 1, **overrides) -> Product:
    data = {
        "product_id": pk,
        "product_name": "USB Cable",
        "sku": "USB-001",
        "category_id": 1,
        "description": "Braided",
        "quantity": 10,
        "unit_price": Decimal("9.99"),
    }
    data.update(overrides)
    return Product(**data)


# ===========================================================================
# create
# ===========================================================================


class TestCreate:
    def test_success_saves_and_rereads(self, service, mock_repo):
        result = service.create(_create_dto())

        saved = mock_repo.save.call_args.args[0]
        assert isinstance(saved, Product)
        assert saved.product_name == "USB Cable"
        assert saved.category_id == 1
        assert saved.is_active is True
        assert result is mock_repo.get_by_id.return_value

    def test_dangling_category_raises(self, service, mock_repo, category_repo):
        category_repo.exists.return_value = False

        with pytest.raises(InvalidReference) as exc_info:
            service.create(_create_dto(category_id=999999))

        assert exc_info.value.message == "Invalid category_id. Category does not exist"
        mock_repo.save.assert_not_called()

    def test_duplicate_sku_raises(self, service, mock_repo):
        mock_repo.get_by_sku.return_value = _product(pk=7)

        with pytest.raises(ProductAlreadyExists, match="SKU 'USB-001'"):
            service.create(_create_dto())

        mock_repo.save.assert_not_called()

    def test_duplicate_sku_is_invalid_input(self):
        assert issubclass(ProductAlreadyExists, InvalidInput)


# ===========================================================================
# update
# ===========================================================================


class TestUpdate:
    def test_success_replaces_business_fields(self, service, mock_repo):
        existing = _product()
        mock_repo.get_for_update.return_value = existing
        mock_repo.get_by_sku.return_value = existing

        service.update("1", _update_dto())

        assert existing.product_name == "USB-C Cable"
        assert existing.quantity == 25
        assert existing.unit_price == Decimal("12.50")
        mock_repo.save.assert_called_once_with(existing)
        mock_repo.get_by_id.assert_called_once_with(1)

    def test_omitted_description_is_cleared(self, service, mock_repo):
        existing = _product(is_active=False)
        mock_repo.get_for_update.return_value = existing

        service.update(1, _update_dto())

        assert existing.description == ""
        assert existing.is_active is False

    def test_supplied_is_active_applied(self, service, mock_repo):
        existing = _product(is_active=False)
        mock_repo.get_for_update.return_value = existing

        service.update(1, _update_dto(is_active=True, description="Flat"))

        assert existing.is_active is True
        assert existing.description == "Flat"

    def test_sku_taken_by_another_product(self, service, mock_repo):
        mock_repo.get_for_update.return_value = _product(pk=1)
        mock_repo.get_by_sku.return_value = _product(pk=2, sku="USB-002")

        with pytest.raises(ProductAlreadyExists):
            service.update(1, _update_dto(sku="USB-002"))

        mock_repo.save.assert_not_called()

    def test_not_found(self, service, mock_repo):
        mock_repo.get_for_update.return_value = None

        with pytest.raises(ProductNotFound, match="Product not found"):
            service.update(42, _update_dto())

    def test_malformed_id(self, service, mock_repo):
        with pytest.raises(InvalidInput, match="Invalid ID format"):
            service.update("abc", _update_dto())
        mock_repo.get_for_update.assert_not_called()


# ===========================================================================
# get / list
# ===========================================================================


class TestQueries:
    def test_get_success(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product()
        assert service.get("1").sku == "USB-001"

    def test_get_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ProductNotFound):
            service.get(5)

    def test_list_with_categories_delegates(self, service, mock_repo):
        mock_repo.list_with_categories.return_value = [_product()]
        assert len(service.list_with_categories()) == 1
        mock_repo.list_with_categories.assert_called_once_with()


# ===========================================================================
# set_active
# ===========================================================================


class TestSetActive:
    def test_deactivate(self, service, mock_repo):
        existing = _product()
        mock_repo.get_for_update.return_value = existing

        service.set_active("1", False)

        assert existing.is_active is False
        mock_repo.save.assert_called_once_with(existing, update_fields=["is_active"])

    @pytest.mark.parametrize("value", ["true", 1, None])
    def test_non_boolean_rejected_before_lookup(self, service, mock_repo, value):
        with pytest.raises(InvalidStatusValue, match="Must be true or false"):
            service.set_active(1, value)
        mock_repo.get_for_update.assert_not_called()

    def test_not_found(self, service, mock_repo):
        mock_repo.get_for_update.return_value = None
        with pytest.raises(ProductNotFound):
            service.set_active(3, True)
