"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``) and reject
unknown fields.

Status fields are plain optional strings here; their closed sets are
enforced by the Status Policy inside the service, so every write path
(create, update, status patch) reports the same ``Invalid <field> value``
error.

- ``CreateOrderDTO`` / ``UpdateOrderDTO``: purchase order body.
- ``OrderStatusPatchDTO``: ``PATCH /orders/{id}/status`` body.
- ``CreateExportOrderDTO`` / ``UpdateExportOrderDTO``: export order body.
- ``ExportOrderStatusPatchDTO``: ``PATCH /export-orders/{id}/status`` body.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from modules.core.validation import require_text

Amount = Annotated[Decimal, Field(max_digits=12, decimal_places=2)]


class _OrderBody(BaseModel):
    """Validation shared by purchase and export order bodies."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("quantity", check_fields=False)
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1")
        return v

    @field_validator("subtotal", "total_amount", check_fields=False)
    @classmethod
    def amounts_must_not_be_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Subtotal and Total Amount cannot be negative")
        return v


# ---------------------------------------------------------------------------
# Purchase orders
# ---------------------------------------------------------------------------


class CreateOrderDTO(_OrderBody):
    """Immutable DTO for purchase order creation.

    ``status`` defaults to Pending when omitted; ``order_date`` to now.
    """

    supplier_id: StrictInt
    product_id: StrictInt
    quantity: StrictInt
    subtotal: Amount
    total_amount: Amount
    order_date: Optional[datetime] = None
    status: Optional[str] = None


class UpdateOrderDTO(CreateOrderDTO):
    """Immutable DTO for full purchase order updates.

    Business fields are replaced; an omitted ``status`` or ``order_date``
    keeps its stored value.
    """


class OrderStatusPatchDTO(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    status: Optional[str] = None


# ---------------------------------------------------------------------------
# Export orders
# ---------------------------------------------------------------------------


class CreateExportOrderDTO(_OrderBody):
    """Immutable DTO for export order creation.

    ``shipping_status`` and ``status`` default to Pending when omitted.
    """

    customer_id: StrictInt
    product_id: StrictInt
    quantity: StrictInt
    subtotal: Amount
    total_amount: Amount
    shipping_address: str
    shipping_date: Optional[date] = None
    order_date: Optional[datetime] = None
    shipping_status: Optional[str] = None
    status: Optional[str] = None

    @field_validator("shipping_address")
    @classmethod
    def address_must_not_be_blank(cls, v: str) -> str:
        return require_text(v, "shipping_address")


class UpdateExportOrderDTO(CreateExportOrderDTO):
    """Immutable DTO for full export order updates.

    ``shipping_date`` is replaced like every business field (omitted means
    cleared); omitted status fields and ``order_date`` keep their stored
    value.
    """


class ExportOrderStatusPatchDTO(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    shipping_status: Optional[str] = None
    status: Optional[str] = None
