"""Kernel query – filter conditions and their closed operator sets."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Sequence, Union

from mp_caml.kernel.query.fields import FieldRef, FieldType


class FilterOperator(str, Enum):
    """Comparison operators; the value is the CAML element name."""

    EQ = "Eq"
    NEQ = "Neq"
    GT = "Gt"
    LT = "Lt"
    GEQ = "Geq"
    LEQ = "Leq"
    CONTAINS = "Contains"
    BEGINS_WITH = "BeginsWith"
    CONTAINS_ANY = "ContainsAny"
    CONTAINS_ALL = "ContainsAll"
    IS_NULL = "IsNull"
    IS_NOT_NULL = "IsNotNull"

    @property
    def is_unary(self) -> bool:
        return self in (FilterOperator.IS_NULL, FilterOperator.IS_NOT_NULL)


class FilterJoin(str, Enum):
    """Boolean operator combining a condition with the ones after it."""

    AND = "And"
    OR = "Or"


@dataclasses.dataclass(frozen=True)
class TaxonomyTerm:
    """A managed-metadata term; ``key`` is its numeric lookup id."""

    key: str
    name: str = ""


@dataclasses.dataclass(frozen=True)
class PersonRef:
    """A site user; ``id`` is the numeric site user id."""

    id: str
    display_name: str = ""
    login: str = ""


FilterValue = Union[str, Sequence[TaxonomyTerm], Sequence[PersonRef], None]

#: Index given to conditions synthesized while expanding ``ContainsAll``.
SYNTHETIC_INDEX = None


@dataclasses.dataclass(frozen=True)
class FilterCondition:
    """One author-defined filter row.

    ``join`` combines this condition with everything that follows it in
    ``index`` order. ``include_time`` only matters for ``Datetime`` fields,
    ``me`` only for ``User`` fields, and ``expression`` (e.g.
    ``"[Today] - 7"``) takes precedence over ``value`` for dates.
    """

    index: int | None
    field: FieldRef
    operator: FilterOperator = FilterOperator.EQ
    value: Any = None
    join: FilterJoin = FilterJoin.AND
    include_time: bool = False
    me: bool = False
    expression: str | None = None

    @property
    def field_type(self) -> FieldType:
        return self.field.type

    def copy_with(self, **changes: Any) -> "FilterCondition":
        """Return a new instance with given fields replaced."""
        return dataclasses.replace(self, **changes)


def sort_by_index(conditions: Sequence[FilterCondition]) -> list[FilterCondition]:
    """Return a new list ordered by ``index``; synthetic indexes sort first."""
    return sorted(conditions, key=lambda c: (c.index is not None, c.index or 0))


__all__ = [
    "SYNTHETIC_INDEX",
    "FilterCondition",
    "FilterJoin",
    "FilterOperator",
    "FilterValue",
    "PersonRef",
    "TaxonomyTerm",
    "sort_by_index",
]
