"""Kernel query – QuerySettings value object."""
from __future__ import annotations

import dataclasses
from enum import Enum

from mp_caml.kernel.query.filters import FilterCondition


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclasses.dataclass(frozen=True)
class QuerySettings:
    """Everything needed to build one ``<View>`` document."""

    filters: tuple[FilterCondition, ...] = ()
    order_by: str | None = None
    order_by_direction: SortDirection = SortDirection.ASC
    limit_enabled: bool = False
    item_limit: int | None = None
    view_fields: tuple[str, ...] = ()
    recursive_enabled: bool = False


__all__ = ["QuerySettings", "SortDirection"]
