"""Category DTOs for the Service Layer.

Pydantic v2 contracts between the API layer and the Service layer.
DTOs are immutable (``frozen=True``) and reject unknown fields.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictBool, field_validator

from modules.core.validation import blank_if_none, require_text


class CreateCategoryDTO(BaseModel):
    """Immutable DTO for category creation requests."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    category_name: str
    description: str = ""
    is_active: StrictBool = True

    @field_validator("category_name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        return require_text(v, "category_name")


class UpdateCategoryDTO(BaseModel):
    """Immutable DTO for category update requests.

    ``category_name`` is required; an omitted or ``null`` ``description``
    clears it.  An omitted ``is_active`` keeps its value.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    category_name: str
    description: str = ""
    is_active: Optional[StrictBool] = None

    @field_validator("category_name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        return require_text(v, "category_name")

    @field_validator("description", mode="before")
    @classmethod
    def null_clears_description(cls, v):
        return blank_if_none(v)
