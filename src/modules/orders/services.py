"""Order service layer (Use Cases).

Orchestrates the integrity and status-lifecycle rules shared by purchase
orders (``OrderService``) and export orders (``ExportOrderService``).
All write operations are atomic: the service defines the unit-of-work
boundary, so reference checks, status validation, the row lock, the write
and the re-read see one consistent snapshot.

Business rules enforced:
- Supplier / customer and product references must exist (Reference
  Validator), checked in that order.
- Status dimensions accept only their closed set of values; omitted
  dimensions default to Pending on create and keep their stored value on
  update and status patch (Status Policy ``merge``).
- Status-only updates touch only the status columns (+ ``updated_at``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Tuple, Type

import structlog
from django.db import models, transaction

from modules.core.exceptions import InvalidInput, NotFound
from modules.core.identifiers import parse_id
from modules.core.references import EntityKind, ReferenceValidator
from modules.core.status_policy import StatusDimension, merge, present_dimensions
from modules.orders.constants import ORDER_STATUS, SHIPPING_STATUS
from modules.orders.exceptions import ExportOrderNotFound, OrderNotFound
from modules.orders.models import ExportOrder, Order

if TYPE_CHECKING:
    from pydantic import BaseModel as DTO

    from modules.orders.repositories.interfaces import (
        IExportOrderRepository,
        IOrderRepository,
    )

logger = structlog.get_logger(__name__)

NO_STATUS_MESSAGE = "No status provided to update"


@dataclass(frozen=True)
class StatusChange:
    """Outcome of a status patch: the re-read row and the client message."""

    order: models.Model
    message: str


class OrderAggregateService(ABC):
    """Shared use cases for the two order aggregates.

    Subclasses declare the model, the referenced party, the business
    fields replaced on update and the status dimensions they carry.
    Receives the order repository and a ``ReferenceValidator`` via
    constructor injection (DIP).
    """

    model: ClassVar[Type[models.Model]]
    label: ClassVar[str]
    log_name: ClassVar[str]
    not_found: ClassVar[Type[NotFound]]
    party: ClassVar[EntityKind]
    business_fields: ClassVar[Tuple[str, ...]]
    dimensions: ClassVar[Tuple[StatusDimension, ...]]

    def __init__(
        self,
        repository: IOrderRepository | IExportOrderRepository,
        references: ReferenceValidator,
    ) -> None:
        self._repo = repository
        self._references = references

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_orders(self) -> models.QuerySet:
        """Joined rows in primary key order (filters are applied lazily)."""
        return self._repo.queryset()

    def get_order(self, id: Any) -> models.Model:
        """Retrieve one order with its related names loaded.

        Raises:
            InvalidInput: if ``id`` is not a positive integer.
            NotFound: if the order does not exist.
        """
        pk = parse_id(id)
        order = self._repo.get_by_id(pk)
        if order is None:
            raise self.not_found(f"{self.label} not found")
        return order

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order(self, dto: DTO) -> models.Model:
        """Validate references and statuses, insert, and re-read the row.

        Raises:
            InvalidReference: party or product does not exist.
            InvalidStatusValue: a supplied status is outside its set.
        """
        log = logger.bind(
            **{self.party.field: getattr(dto, self.party.field)},
            product_id=dto.product_id,
        )
        self._check_references(dto)

        defaults = {d.field: d.default for d in self.dimensions}
        statuses = merge(defaults, self._status_patch(dto), self.dimensions)

        fields: Dict[str, Any] = {f: getattr(dto, f) for f in self.business_fields}
        if dto.order_date is not None:
            fields["order_date"] = dto.order_date

        order = self._repo.save(self.model(**fields, **statuses))
        log.info(f"{self.log_name}.created", pk=order.pk, **statuses)
        return self._repo.get_by_id(order.pk)

    @transaction.atomic
    def update_order(self, id: Any, dto: DTO) -> models.Model:
        """Replace the business fields of an existing order.

        Status dimensions present in ``dto`` are validated and applied;
        absent ones keep their stored value.

        Raises:
            InvalidInput: malformed id.
            NotFound: the order does not exist.
            InvalidReference: party or product does not exist.
            InvalidStatusValue: a supplied status is outside its set.
        """
        pk = parse_id(id)
        order = self._repo.get_for_update(pk)
        if order is None:
            raise self.not_found(f"{self.label} not found")

        log = logger.bind(pk=pk)
        self._check_references(dto)

        current = {d.field: getattr(order, d.field) for d in self.dimensions}
        statuses = merge(current, self._status_patch(dto), self.dimensions)

        for field in self.business_fields:
            setattr(order, field, getattr(dto, field))
        if dto.order_date is not None:
            order.order_date = dto.order_date
        for field, value in statuses.items():
            setattr(order, field, value)

        self._repo.save(order)
        log.info(f"{self.log_name}.updated", **statuses)
        return self._repo.get_by_id(pk)

    @transaction.atomic
    def update_status(self, id: Any, patch: DTO) -> StatusChange:
        """Apply a partial status update.

        Raises:
            InvalidInput: malformed id, or no status dimension supplied.
            InvalidStatusValue: a supplied status is outside its set.
            NotFound: the order does not exist.
        """
        pk = parse_id(id)
        values = patch.model_dump()
        present = present_dimensions(values, self.dimensions)
        if not present:
            raise InvalidInput(NO_STATUS_MESSAGE)
        for dimension in present:
            dimension.validate(values[dimension.field])

        order = self._repo.get_for_update(pk)
        if order is None:
            raise self.not_found(f"{self.label} not found")

        log = logger.bind(pk=pk)
        current = {d.field: getattr(order, d.field) for d in self.dimensions}
        merged = merge(current, values, self.dimensions)

        changed = [d.field for d in present]
        for field in changed:
            setattr(order, field, merged[field])
        self._repo.save(order, update_fields=changed)

        log.info(
            f"{self.log_name}.status_updated",
            old=current,
            new=merged,
        )
        order = self._repo.get_by_id(pk)
        return StatusChange(order=order, message=self._status_message(order, present))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_references(self, dto: DTO) -> None:
        self._references.require(self.party, getattr(dto, self.party.field))
        self._references.require(EntityKind.PRODUCT, dto.product_id)

    def _status_patch(self, dto: DTO) -> Dict[str, Any]:
        return {d.field: getattr(dto, d.field) for d in self.dimensions}

    @abstractmethod
    def _status_message(self, order: models.Model, present: list) -> str:
        """Client message for a status patch that applied ``present``."""


class OrderService(OrderAggregateService):
    """Application service for purchase orders (``/api/orders``)."""

    model = Order
    label = "Order"
    log_name = "order"
    not_found = OrderNotFound
    party = EntityKind.SUPPLIER
    business_fields = (
        "supplier_id",
        "product_id",
        "quantity",
        "subtotal",
        "total_amount",
    )
    dimensions = (ORDER_STATUS,)

    def _status_message(self, order: Order, present: list) -> str:
        return f"Order status updated successfully to {order.status}"


class ExportOrderService(OrderAggregateService):
    """Application service for export orders (``/api/export-orders``)."""

    model = ExportOrder
    label = "Export Order"
    log_name = "export_order"
    not_found = ExportOrderNotFound
    party = EntityKind.CUSTOMER
    business_fields = (
        "customer_id",
        "product_id",
        "quantity",
        "subtotal",
        "total_amount",
        "shipping_address",
        "shipping_date",
    )
    dimensions = (SHIPPING_STATUS, ORDER_STATUS)

    def _status_message(self, order: ExportOrder, present: list) -> str:
        applied = ", ".join(f"{d.field}: {getattr(order, d.field)}" for d in present)
        return f"Export Order status updated successfully ({applied})"
