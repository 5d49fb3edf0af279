"""Status dimensions and the merge policy for partial status updates.

A *status dimension* is one independently-validated status-like field
(``status``, ``shipping_status``, ``is_active``).  Each dimension owns a
closed set of legal values; anything else is rejected.

There is no transition graph: any member of the set may follow
any other member.  The policy only answers "is this value legal?" and
"what does the row look like after applying this patch?".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from modules.core.exceptions import InvalidStatusValue


@dataclass(frozen=True)
class StatusDimension:
    """One status-like field and its closed set of values."""

    field: str
    values: frozenset
    hint: str = ""
    default: Any = None

    def is_valid(self, value: Any) -> bool:
        # ``True == 1`` in Python, so members compare by type as well as value.
        return any(
            isinstance(value, type(member)) and value == member
            for member in self.values
        )

    def validate(self, value: Any) -> Any:
        if not self.is_valid(value):
            raise InvalidStatusValue(self.field, self.hint)
        return value


def choices_dimension(
    field: str, choices: Iterable[str], default: str | None = None
) -> StatusDimension:
    """Build a dimension from Django ``TextChoices`` values (plain ``str``)."""
    return StatusDimension(
        field=field,
        values=frozenset(str(c) for c in choices),
        default=str(default) if default is not None else None,
    )


ACTIVE_FLAG = StatusDimension(
    field="is_active",
    values=frozenset({True, False}),
    hint="Must be true or false",
)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def present_dimensions(
    patch: Mapping[str, Any], dimensions: Iterable[StatusDimension]
) -> list[StatusDimension]:
    """Dimensions that carry a value in ``patch``.

    ``null`` and blank strings count as absent.
    """
    return [d for d in dimensions if not _is_blank(patch.get(d.field))]


def merge(
    current: Mapping[str, Any],
    patch: Mapping[str, Any],
    dimensions: Iterable[StatusDimension],
) -> dict[str, Any]:
    """Apply ``patch`` on top of ``current`` for the given dimensions.

    Every present value is validated before anything is applied, so an
    invalid value rejects the whole patch.

    Raises:
        InvalidStatusValue: naming the first offending dimension.
    """
    dimensions = list(dimensions)
    for dimension in present_dimensions(patch, dimensions):
        dimension.validate(patch[dimension.field])

    merged = {d.field: current.get(d.field) for d in dimensions}
    for dimension in present_dimensions(patch, dimensions):
        merged[dimension.field] = patch[dimension.field]
    return merged
