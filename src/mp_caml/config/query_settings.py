"""Config – QuerySettingsMapper.

Turns the property bag persisted by the query web part (camelCase keys,
enum members stored by name or ordinal) into :class:`QuerySettings`.
Every problem found is collected; a single :class:`ValidationError` lists
them all with dotted paths such as ``filters.2.operator``.
"""
from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, TypeVar

from mp_caml.kernel.errors import ValidationError
from mp_caml.kernel.query import (
    FieldRef,
    FieldType,
    FilterCondition,
    FilterJoin,
    FilterOperator,
    PersonRef,
    QuerySettings,
    SortDirection,
    TaxonomyTerm,
)
from mp_caml.observability.logging import get_logger

logger = get_logger(__name__)

E = TypeVar("E", bound=Enum)


class _Errors:
    def __init__(self) -> None:
        self.items: list[dict[str, Any]] = []

    def add(self, path: str, message: str) -> None:
        self.items.append({"path": path, "message": message})


def _enum(enum_cls: type[E], raw: Any, path: str, errors: _Errors, default: E | None = None) -> E | None:
    if raw is None or raw == "":
        if default is None:
            errors.add(path, "is required")
        return default
    members = list(enum_cls)
    if isinstance(raw, bool):
        errors.add(path, f"invalid {enum_cls.__name__}: {raw!r}")
        return default
    if isinstance(raw, int):
        if 0 <= raw < len(members):
            return members[raw]
        errors.add(path, f"ordinal {raw} out of range for {enum_cls.__name__}")
        return default
    text = str(raw)
    for member in members:
        if text.lower() in (member.name.lower(), str(member.value).lower()):
            return member
    errors.add(path, f"unknown {enum_cls.__name__}: {text!r}")
    return default


def _bool(raw: Any) -> bool:
    if isinstance(raw, str):
        return raw.strip().lower() in ("1", "true", "yes", "on")
    return bool(raw)


class QuerySettingsMapper:
    """Map raw web-part properties to query value objects.

    Example::

        settings = QuerySettingsMapper.from_dict({
            "filters": [{"index": 0, "field": {"internalName": "Title", "type": "Text"},
                         "operator": "Eq", "value": "Hello", "join": "And"}],
            "orderBy": "Modified",
            "orderByDirection": "desc",
        })
    """

    @classmethod
    def from_json(cls, payload: str) -> QuerySettings:
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise ValidationError("Query settings are not valid JSON", cause=exc) from exc
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> QuerySettings:
        if not isinstance(payload, Mapping):
            raise ValidationError(
                "Query settings must be an object",
                errors=[{"path": "", "message": f"expected object, got {type(payload).__name__}"}],
            )
        errors = _Errors()

        filters: list[FilterCondition] = []
        raw_filters = payload.get("filters") or []
        if isinstance(raw_filters, Sequence) and not isinstance(raw_filters, str):
            for position, raw in enumerate(raw_filters):
                condition = cls._filter(raw, f"filters.{position}", errors)
                if condition is not None:
                    filters.append(condition)
        else:
            errors.add("filters", "expected a list")

        seen: set[int] = set()
        for position, condition in enumerate(filters):
            if condition.index in seen:
                errors.add(f"filters.{position}.index", f"duplicate index {condition.index}")
            if condition.index is not None:
                seen.add(condition.index)

        item_limit = payload.get("itemLimit")
        if item_limit is not None and item_limit != "":
            try:
                item_limit = int(item_limit)
            except (TypeError, ValueError):
                errors.add("itemLimit", f"expected an integer, got {item_limit!r}")
                item_limit = None
        else:
            item_limit = None

        view_fields = payload.get("viewFields") or []
        if isinstance(view_fields, str) or not isinstance(view_fields, Sequence):
            errors.add("viewFields", "expected a list of field names")
            view_fields = []

        direction = _enum(
            SortDirection, payload.get("orderByDirection"), "orderByDirection", errors, SortDirection.ASC
        )

        if errors.items:
            error = ValidationError(
                "Invalid query settings", errors=errors.items, detail={"error_count": len(errors.items)}
            )
            logger.info("query_settings.invalid", **error.log_fields())
            raise error

        return QuerySettings(
            filters=tuple(filters),
            order_by=payload.get("orderBy") or None,
            order_by_direction=direction or SortDirection.ASC,
            limit_enabled=_bool(payload.get("limitEnabled", False)),
            item_limit=item_limit,
            view_fields=tuple(str(f) for f in view_fields),
            recursive_enabled=_bool(payload.get("recursiveEnabled", False)),
        )

    @classmethod
    def _filter(cls, raw: Any, path: str, errors: _Errors) -> FilterCondition | None:
        if not isinstance(raw, Mapping):
            errors.add(path, "expected an object")
            return None

        field = raw.get("field")
        if not isinstance(field, Mapping) or not field.get("internalName"):
            errors.add(f"{path}.field.internalName", "is required")
            return None
        field_type = _enum(FieldType, field.get("type"), f"{path}.field.type", errors, FieldType.TEXT)
        field_ref = FieldRef(
            internal_name=str(field["internalName"]),
            type=field_type or FieldType.TEXT,
            display_name=str(field.get("displayName") or ""),
        )

        index = raw.get("index")
        if index is not None:
            try:
                index = int(index)
            except (TypeError, ValueError):
                errors.add(f"{path}.index", f"expected an integer, got {index!r}")
                return None

        operator = _enum(FilterOperator, raw.get("operator"), f"{path}.operator", errors)
        join = _enum(FilterJoin, raw.get("join"), f"{path}.join", errors, FilterJoin.AND)
        if operator is None:
            return None

        expression = raw.get("expression")
        return FilterCondition(
            index=index,
            field=field_ref,
            operator=operator,
            value=cls._value(raw.get("value"), field_ref.type),
            join=join or FilterJoin.AND,
            include_time=_bool(raw.get("includeTime", False)),
            me=_bool(raw.get("me", False)),
            expression=str(expression) if expression else None,
        )

    @staticmethod
    def _value(raw: Any, field_type: FieldType) -> Any:
        if field_type is FieldType.TAXONOMY and isinstance(raw, Sequence) and not isinstance(raw, str):
            return tuple(
                TaxonomyTerm(key=str(t.get("key", "")), name=str(t.get("name", "")))
                if isinstance(t, Mapping)
                else TaxonomyTerm(key=str(t))
                for t in raw
            )
        if field_type is FieldType.USER and isinstance(raw, Sequence) and not isinstance(raw, str):
            return tuple(
                PersonRef(
                    id=str(p.get("optionalText") or p.get("id") or ""),
                    display_name=str(p.get("text") or p.get("displayName") or ""),
                    login=str(p.get("secondaryText") or p.get("login") or ""),
                )
                if isinstance(p, Mapping)
                else PersonRef(id=str(p))
                for p in raw
            )
        return raw


__all__ = ["QuerySettingsMapper"]
