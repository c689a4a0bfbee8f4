"""FilterCompiler – turns ordered filter conditions into nested CAML.

Conditions are visited back to front. Each rendered fragment is placed in
front of what has been built so far and, from the second fragment on, the
whole is wrapped in the current condition's join element. For author order
``A, B, C`` this yields ``<jA>A<jB>B C</jB></jA>``: a right-associative
fold in which the join of the last condition is never used. Mixed
``And``/``Or`` joins therefore group towards the end of the list.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Sequence

from mp_caml.application.caml import markup
from mp_caml.application.caml.context import CompileContext
from mp_caml.application.caml.values import ValueFormatter
from mp_caml.kernel.query import (
    SYNTHETIC_INDEX,
    FieldType,
    FilterCondition,
    FilterJoin,
    FilterOperator,
)
from mp_caml.observability.logging import get_logger

logger = get_logger(__name__)


def expand_contains_all(condition: FilterCondition) -> list[FilterCondition]:
    """One ``ContainsAny`` condition per value, all joined with ``And``."""
    return [
        FilterCondition(
            index=SYNTHETIC_INDEX,
            field=condition.field,
            operator=FilterOperator.CONTAINS_ANY,
            value=(item,),
            join=FilterJoin.AND,
        )
        for item in _as_items(condition.value)
    ]


def _as_items(value: Any) -> tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes, Mapping)):
        return (value,) if value else ()
    try:
        return tuple(value)
    except TypeError:
        return (value,)


def _lookup_id(item: Any, *names: str) -> str:
    """First non-empty id attribute (or mapping key) among *names*."""
    for name in names:
        found = item.get(name) if isinstance(item, Mapping) else getattr(item, name, None)
        if found is not None and found != "":
            return str(found)
    if isinstance(item, (str, int)):
        return str(item)
    return ""


class FilterCompiler:
    """Compile filter conditions into the body of a ``<Where>`` element."""

    def __init__(
        self,
        context: CompileContext | None = None,
        formatter: ValueFormatter | None = None,
    ) -> None:
        self._context = context or CompileContext()
        self._formatter = formatter or ValueFormatter(self._context)

    def compile(self, conditions: Sequence[FilterCondition]) -> str:
        """Compile *conditions*, already in author (``index``) order."""
        query = ""
        for position, condition in enumerate(reversed(conditions), start=1):
            query = self.render(condition) + query
            if position >= 2:
                query = markup.element(condition.join.value, query)
        return query

    def render(self, condition: FilterCondition) -> str:
        """Markup for a single condition, without any join wrapping."""
        if condition.operator.is_unary:
            return markup.unary(condition.operator.value, condition.field.internal_name)

        match condition.field_type:
            case FieldType.TAXONOMY:
                return self._render_taxonomy(condition)
            case FieldType.USER:
                return self._render_person(condition)
            case (
                FieldType.TEXT
                | FieldType.NOTE
                | FieldType.NUMBER
                | FieldType.CURRENCY
                | FieldType.INTEGER
                | FieldType.COUNTER
                | FieldType.BOOLEAN
                | FieldType.CHOICE
                | FieldType.DATETIME
                | FieldType.LOOKUP
                | FieldType.URL
            ):
                return self._render_comparison(condition)
            case _:
                logger.warning("caml_filter.unknown_field_type", field=condition.field.internal_name)
                return self._render_comparison(condition)

    # Per-type generators ------------------------------------------------
    def _render_comparison(self, condition: FilterCondition) -> str:
        special = ""
        if condition.field_type is FieldType.DATETIME:
            special = markup.include_time(condition.include_time)
        return markup.comparison(
            condition.operator.value,
            condition.field.internal_name,
            condition.field_type.value_type,
            self._formatter.format(condition),
            special,
        )

    def _render_taxonomy(self, condition: FilterCondition) -> str:
        return self._render_multi_value(condition, ("key", "id"))

    def _render_person(self, condition: FilterCondition) -> str:
        if condition.me:
            return markup.current_user(condition.field.internal_name)
        return self._render_multi_value(condition, ("optionalText", "optional_text", "id"))

    def _render_multi_value(self, condition: FilterCondition, id_names: tuple[str, ...]) -> str:
        items = _as_items(condition.value)
        if not items:
            return ""
        match condition.operator:
            case FilterOperator.CONTAINS_ANY:
                ids = [_lookup_id(item, *id_names) for item in items]
                return markup.membership(condition.field.internal_name, ids)
            case FilterOperator.CONTAINS_ALL:
                return self.compile(expand_contains_all(condition))
            case _:
                logger.warning(
                    "caml_filter.unsupported_operator",
                    field=condition.field.internal_name,
                    field_type=condition.field_type.value,
                    operator=condition.operator.value,
                )
                return ""


__all__ = ["FilterCompiler", "expand_contains_all"]
