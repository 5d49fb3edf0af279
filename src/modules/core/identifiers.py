"""Parsing of entity identifiers taken from URL paths."""

from __future__ import annotations

from typing import Any

from modules.core.exceptions import InvalidInput

INVALID_ID_MESSAGE = "Invalid ID format"


def parse_id(raw: Any) -> int:
    """Return ``raw`` as a positive integer identifier.

    Accepts ints and decimal digit strings.  Booleans, signs, blanks and
    anything else raise ``InvalidInput``.
    """
    if isinstance(raw, bool):
        raise InvalidInput(INVALID_ID_MESSAGE)
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and raw.strip().isdecimal():
        value = int(raw.strip())
    else:
        raise InvalidInput(INVALID_ID_MESSAGE)
    if value < 1:
        raise InvalidInput(INVALID_ID_MESSAGE)
    return value


def is_valid_id(raw: Any) -> bool:
    try:
        parse_id(raw)
    except InvalidInput:
        return False
    return True
