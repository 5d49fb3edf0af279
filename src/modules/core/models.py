"""Base abstract models for the inventory system.

Provides:
- ``BaseModel``: ``created_at`` / ``updated_at`` timestamp bookkeeping.
- ``MasterDataModel``: extends BaseModel with the ``is_active`` flag used by
  categories, products, suppliers and customers.

Design decisions:
- Each concrete model declares its own integer primary key named after the
  entity (``product_id``, ``order_id``...), matching the JSON field names.
- Rows are never physically removed.  Master data is deactivated through
  ``is_active``; orders reach a terminal status instead.
- ``save()`` guard ensures ``updated_at`` is included when ``update_fields``
  is specified (Django skips ``auto_now`` fields otherwise).
"""

from __future__ import annotations

from django.db import models

# ---------------------------------------------------------------------------
# BaseModel
# ---------------------------------------------------------------------------


class BaseModel(models.Model):
    """Abstract base with timestamp bookkeeping."""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)


# ---------------------------------------------------------------------------
# Master data
# ---------------------------------------------------------------------------


class MasterDataModel(BaseModel):
    """Abstract model for entities that are deactivated instead of deleted."""

    is_active = models.BooleanField(default=True)

    class Meta:
        abstract = True
