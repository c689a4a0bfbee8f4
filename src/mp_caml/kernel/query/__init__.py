"""Kernel query – field, filter and settings value objects."""
from mp_caml.kernel.query.fields import FieldRef, FieldType
from mp_caml.kernel.query.filters import (
    SYNTHETIC_INDEX,
    FilterCondition,
    FilterJoin,
    FilterOperator,
    FilterValue,
    PersonRef,
    TaxonomyTerm,
    sort_by_index,
)
from mp_caml.kernel.query.settings import QuerySettings, SortDirection

__all__ = [
    "SYNTHETIC_INDEX",
    "FieldRef",
    "FieldType",
    "FilterCondition",
    "FilterJoin",
    "FilterOperator",
    "FilterValue",
    "PersonRef",
    "QuerySettings",
    "SortDirection",
    "TaxonomyTerm",
    "sort_by_index",
]
