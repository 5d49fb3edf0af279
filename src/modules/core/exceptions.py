"""Shared domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses:

- ``InvalidInput`` → 400
- ``NotFound`` → 404

Store failures are left as ``django.db.DatabaseError`` and rendered as 500
by ``modules.core.exception_handler``.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for errors whose message is safe to show to API clients."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidInput(DomainError):
    """Malformed identifier, missing or invalid field in a request."""


class InvalidStatusValue(InvalidInput):
    """A status dimension received a value outside its closed set."""

    def __init__(self, field: str, hint: str = "") -> None:
        self.field = field
        message = f"Invalid {field} value"
        if hint:
            message = f"{message}. {hint}"
        super().__init__(message)


class InvalidReference(InvalidInput):
    """A foreign key points to a row that does not exist."""


class NotFound(DomainError):
    """The identifier is well-formed but no row matches it."""
