"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``) and reject
unknown fields.

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for full product updates.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    ValidationInfo,
    field_validator,
)

from modules.core.validation import blank_if_none, require_text

NEGATIVE_STOCK_MESSAGE = "Quantity and Unit Price must be positive numbers"

Price = Annotated[Decimal, Field(max_digits=10, decimal_places=2)]


class _ProductFields(BaseModel):
    """Fields required by both creation and update."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    product_name: str
    sku: str
    category_id: StrictInt
    quantity: StrictInt
    unit_price: Price

    @field_validator("product_name", "sku")
    @classmethod
    def text_must_not_be_blank(cls, v: str, info: ValidationInfo) -> str:
        return require_text(v, info.field_name)

    @field_validator("sku")
    @classmethod
    def normalise_sku(cls, v: str) -> str:
        return v.strip()

    @field_validator("quantity", "unit_price")
    @classmethod
    def must_not_be_negative(cls, v):
        if v < 0:
            raise ValueError(NEGATIVE_STOCK_MESSAGE)
        return v


class CreateProductDTO(_ProductFields):
    """Immutable DTO for product creation requests."""

    description: str = ""
    is_active: StrictBool = True


class UpdateProductDTO(_ProductFields):
    """Immutable DTO for product update requests.

    Every business field is replaced; an omitted or ``null``
    ``description`` clears it.  An omitted ``is_active`` keeps its value.
    """

    description: str = ""
    is_active: Optional[StrictBool] = None

    @field_validator("description", mode="before")
    @classmethod
    def null_clears_description(cls, v):
        return blank_if_none(v)
