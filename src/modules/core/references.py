"""Reference Validator: existence checks for foreign-key targets.

Used by the service layer before any insert/update that carries a foreign
key (``Order.supplier_id``, ``ExportOrder.customer_id``, ``product_id``,
``Product.category_id``).  Each check is a fresh read through the entity's
repository; nothing is cached, since a stale answer would let a dangling
reference through.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping

import structlog

from modules.core.exceptions import InvalidReference

if TYPE_CHECKING:
    from modules.core.repositories.interfaces import IRepository

logger = structlog.get_logger(__name__)


class EntityKind(Enum):
    """Entities that can be the target of a foreign key."""

    CATEGORY = ("category_id", "Category")
    PRODUCT = ("product_id", "Product")
    SUPPLIER = ("supplier_id", "Supplier")
    CUSTOMER = ("customer_id", "Customer")

    def __init__(self, field: str, label: str) -> None:
        self.field = field
        self.label = label


class ReferenceValidator:
    """Checks that referenced rows exist.

    Receives one repository per ``EntityKind`` via constructor injection;
    only the kinds a service actually references need to be supplied.
    """

    def __init__(self, repositories: Mapping[EntityKind, IRepository]) -> None:
        self._repositories = dict(repositories)

    def exists(self, kind: EntityKind, id: Any) -> bool:
        """Return ``True`` when a row of ``kind`` with primary key ``id`` exists."""
        try:
            repository = self._repositories[kind]
        except KeyError:
            raise LookupError(f"No repository registered for {kind.name}") from None
        return repository.exists(id)

    def require(self, kind: EntityKind, id: Any) -> None:
        """Raise ``InvalidReference`` when the referenced row does not exist."""
        if not self.exists(kind, id):
            logger.warning("reference.dangling", kind=kind.name, ref_id=id)
            raise InvalidReference(
                f"Invalid {kind.field}. {kind.label} does not exist"
            )
