"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateCustomerDTO``: input for customer creation.
- ``UpdateCustomerDTO``: input for customer updates.
"""

from __future__ import annotations

from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    StrictBool,
    ValidationInfo,
    field_validator,
)

from modules.core.validation import blank_if_none, require_text


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer creation requests.

    Validates:
    - ``customer_name`` and ``phone`` are non-blank after trimming.
    - ``email``, when given, is a well-formed address (Pydantic ``EmailStr``).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    customer_name: str
    phone: str
    contact_name: str = ""
    email: Optional[EmailStr] = None
    address: str = ""
    is_active: StrictBool = True

    @field_validator("customer_name", "phone")
    @classmethod
    def must_not_be_blank(cls, v: str, info: ValidationInfo) -> str:
        return require_text(v, info.field_name).strip()


class UpdateCustomerDTO(BaseModel):
    """Immutable DTO for customer update requests.

    ``customer_name`` and ``phone`` are required.  Every other business field is
    replaced: omitted or ``null`` text clears the column and a missing
    ``email`` is stored as ``null``.  An omitted ``is_active`` keeps its value.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    customer_name: str
    phone: str
    contact_name: str = ""
    email: Optional[EmailStr] = None
    address: str = ""
    is_active: Optional[StrictBool] = None

    @field_validator("customer_name", "phone")
    @classmethod
    def must_not_be_blank(cls, v: str, info: ValidationInfo) -> str:
        return require_text(v, info.field_name).strip()

    @field_validator("contact_name", "address", mode="before")
    @classmethod
    def null_clears_text(cls, v):
        return blank_if_none(v)
