"""Translation of request-body validation failures into client messages.

Pydantic reports every problem of a payload at once; API clients get one
``{"error": ...}`` string instead.  Missing (or ``null``) required fields are
reported together, anything else reports the first offending field.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import ValidationError as PydanticValidationError

from modules.core.exceptions import InvalidInput

MISSING_FIELDS_MESSAGE = "Missing required fields"


def _field_name(error: Dict[str, Any]) -> str:
    return ".".join(str(part) for part in error.get("loc", ())) or "body"


def validation_message(exc: PydanticValidationError) -> str:
    """Build a single client-facing message from a pydantic ``ValidationError``."""
    errors = exc.errors()

    missing: List[str] = [
        _field_name(e)
        for e in errors
        if e["type"] == "missing" or (e.get("loc") and e.get("input") is None)
    ]
    if missing:
        return f"{MISSING_FIELDS_MESSAGE}: {', '.join(missing)}"

    first = errors[0]
    if first["type"] == "value_error" and "error" in first.get("ctx", {}):
        return str(first["ctx"]["error"])
    if first["type"] == "extra_forbidden":
        return f"Unknown field: {_field_name(first)}"
    if not first.get("loc"):
        return "Request body must be a JSON object"
    return f"Invalid {_field_name(first)}: {first['msg']}"


def parse_body(dto_class, data: Any):
    """Validate ``data`` into ``dto_class``.

    Raises:
        InvalidInput: with the message built by ``validation_message``.
    """
    try:
        return dto_class.model_validate(data)
    except PydanticValidationError as exc:
        raise InvalidInput(validation_message(exc)) from exc


def require_text(value: str, field: str) -> str:
    """Field validator body: ``value`` must not be blank after trimming."""
    if not value or not value.strip():
        raise ValueError(f"{MISSING_FIELDS_MESSAGE}: {field}")
    return value


def blank_if_none(value: Any) -> Any:
    """Before-validator body: an explicit ``null`` clears a text column."""
    return "" if value is None else value
