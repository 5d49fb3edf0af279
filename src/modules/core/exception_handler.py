"""Project-wide DRF exception handler.

Every error leaves the API as ``{"error": "<message>"}``:

- DRF's own exceptions (parse errors, 405, ...) keep their status code.
- ``DomainError`` subclasses that escape a view map to 400 / 404.
- ``django.db.DatabaseError`` becomes 500 carrying the store's message.

Anything else is left to Django, whose ``handler500`` renders the generic
JSON body.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.db import DatabaseError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response

from modules.core.exceptions import DomainError, InvalidInput, NotFound

logger = structlog.get_logger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong!"


def _flatten(detail: Any) -> str:
    """Reduce DRF's nested ``detail`` structure to one string."""
    if isinstance(detail, dict):
        for key, value in detail.items():
            message = _flatten(value)
            return message if key == "non_field_errors" else f"{key}: {message}"
        return ""
    if isinstance(detail, (list, tuple)):
        return _flatten(detail[0]) if detail else ""
    return str(detail)


def domain_error_response(exc: DomainError) -> Response:
    """Render a domain exception as an API error response."""
    if isinstance(exc, InvalidInput):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, NotFound):
        code = status.HTTP_404_NOT_FOUND
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return Response({"error": exc.message}, status=code)


def api_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    if isinstance(exc, DomainError):
        return domain_error_response(exc)

    if isinstance(exc, DatabaseError):
        logger.error("database_error", error=str(exc), exc_info=exc)
        return Response(
            {"error": str(exc)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if isinstance(exc, Http404):
        return Response(
            {"error": GENERIC_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.APIException):
        headers = {}
        if getattr(exc, "wait", None):
            headers["Retry-After"] = str(exc.wait)
        return Response(
            {"error": _flatten(exc.detail)},
            status=exc.status_code,
            headers=headers,
        )

    return None
