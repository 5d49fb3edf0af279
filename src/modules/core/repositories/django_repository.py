"""Django ORM base implementation shared by the entity repositories.

Error handling follows the Null Object pattern: look-ups return ``None``
(or ``False``) instead of raising; the Service Layer decides how to
translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Generic, List, Optional, Type, TypeVar

import structlog
from django.db import models, transaction

from modules.core.identifiers import is_valid_id
from modules.core.repositories.interfaces import IRepository

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=models.Model)


class DjangoRepository(IRepository[M], Generic[M]):
    """Concrete repository backed by Django ORM for a single ``model``."""

    model: ClassVar[Type[models.Model]]
    log_name: ClassVar[str] = "entity"

    def get_queryset(self) -> models.QuerySet:
        return self.model.objects.all()

    def get_by_id(self, id: int) -> Optional[M]:
        """Retrieve a row by primary key; ``None`` for absent or malformed ids."""
        if not is_valid_id(id):
            return None
        return self.get_queryset().filter(pk=id).first()

    def get_for_update(self, id: int) -> Optional[M]:
        """Retrieve a row with a row-level lock.  Must run inside a transaction."""
        if not is_valid_id(id):
            return None
        return self.model.objects.select_for_update().filter(pk=id).first()

    def exists(self, id: Any) -> bool:
        if not is_valid_id(id):
            return False
        return self.model.objects.filter(pk=id).exists()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[M]:
        """List rows in storage order with optional Django ORM look-ups."""
        queryset = self.get_queryset().order_by("pk")
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    @transaction.atomic
    def save(
        self, entity: M, update_fields: Optional[List[str]] = None
    ) -> M:
        """Persist (create or update) a row.

        ``update_fields`` restricts the UPDATE to the given columns
        (``updated_at`` is always added by ``BaseModel.save``).
        """
        is_new = entity._state.adding
        entity.save(update_fields=update_fields)
        logger.info(f"{self.log_name}.saved", pk=entity.pk, is_new=is_new)
        return entity
