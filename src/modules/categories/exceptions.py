"""Category domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import NotFound


class CategoryNotFound(NotFound):
    """The requested category does not exist."""
