"""Service base for master-data entities (categories, products, suppliers,
customers).

Every master entity supports the same use cases: list, get, create, full
update and activation toggle.  Concrete services declare the model, the
``NotFound`` subclass and a label, and may override ``_check`` to enforce
references or uniqueness before any write.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    ClassVar,
    Dict,
    Generic,
    List,
    Optional,
    Type,
    TypeVar,
)

import structlog
from django.db import models, transaction
from pydantic import BaseModel as DTO

from modules.core.exceptions import NotFound
from modules.core.identifiers import parse_id
from modules.core.status_policy import ACTIVE_FLAG

if TYPE_CHECKING:
    from modules.core.references import ReferenceValidator
    from modules.core.repositories.interfaces import IRepository

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=models.Model)


class MasterDataService(Generic[M]):
    """Application service for a master-data entity.

    Receives the entity repository (and, when the entity carries foreign
    keys, a ``ReferenceValidator``) via constructor injection (DIP).
    """

    model: ClassVar[Type[models.Model]]
    label: ClassVar[str]
    log_name: ClassVar[str]
    not_found: ClassVar[Type[NotFound]] = NotFound

    def __init__(
        self,
        repository: IRepository[M],
        references: Optional[ReferenceValidator] = None,
    ) -> None:
        self._repo = repository
        self._references = references

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_all(self, filters: Optional[Dict[str, Any]] = None) -> List[M]:
        return self._repo.list(filters)

    def get(self, id: Any) -> M:
        """Retrieve one row.

        Raises:
            InvalidInput: if ``id`` is not a positive integer.
            NotFound: if no row has that id.
        """
        pk = parse_id(id)
        entity = self._repo.get_by_id(pk)
        if entity is None:
            raise self.not_found(f"{self.label} not found")
        return entity

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, dto: DTO) -> M:
        """Insert a row and return it as re-read from the store."""
        self._check(dto)
        entity = self.model(**dto.model_dump())
        entity = self._repo.save(entity)
        logger.info(f"{self.log_name}.created", pk=entity.pk)
        return self._repo.get_by_id(entity.pk)

    @transaction.atomic
    def update(self, id: Any, dto: DTO) -> M:
        """Replace every business field of an existing row.

        ``is_active`` is only changed when ``dto`` carries it.

        Raises:
            NotFound: if no row has that id.
        """
        pk = parse_id(id)
        entity = self._repo.get_for_update(pk)
        if entity is None:
            raise self.not_found(f"{self.label} not found")

        self._check(dto, current=entity)
        fields = dto.model_dump()
        if fields.get("is_active") is None:
            fields.pop("is_active", None)
        for field, value in fields.items():
            setattr(entity, field, value)

        self._repo.save(entity)
        logger.info(f"{self.log_name}.updated", pk=pk)
        return self._repo.get_by_id(pk)

    @transaction.atomic
    def set_active(self, id: Any, is_active: Any) -> M:
        """Activate or deactivate a row.

        Raises:
            InvalidStatusValue: unless ``is_active`` is a real boolean.
            NotFound: if no row has that id.
        """
        pk = parse_id(id)
        ACTIVE_FLAG.validate(is_active)
        entity = self._repo.get_for_update(pk)
        if entity is None:
            raise self.not_found(f"{self.label} not found")

        entity.is_active = is_active
        self._repo.save(entity, update_fields=["is_active"])
        logger.info(f"{self.log_name}.activation_changed", pk=pk, is_active=is_active)
        return self._repo.get_by_id(pk)

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def _check(self, dto: DTO, current: Optional[M] = None) -> None:
        """Business checks run inside the write transaction, before saving."""
