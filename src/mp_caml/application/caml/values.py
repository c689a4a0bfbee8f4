"""ValueFormatter – renders the text inside a filter's ``<Value>`` element.

Dates are normalised to ``YYYY-MM-DDTHH:MM:SSZ``; date expressions such as
``[Today] + 7`` are evaluated against the context clock; every other value
goes through ``[PageQueryString:name]`` substitution. Nothing here raises:
input that cannot be interpreted is passed through unchanged.
"""
from __future__ import annotations

import re
from datetime import UTC, date, datetime, timedelta
from typing import Any

from mp_caml.application.caml.context import CompileContext
from mp_caml.application.caml.parameters import substitute_parameters
from mp_caml.kernel.query import FieldType, FilterCondition
from mp_caml.observability.logging import get_logger

logger = get_logger(__name__)

CANONICAL_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
TODAY_MARKER = "[Today]"
TODAY_OFFSET = re.compile(r"\[Today\]\s*([+-])\s*\[?(\d+)\]?")


def render_datetime(value: datetime | date) -> str:
    """Render *value* in the canonical form; aware datetimes are shifted to UTC."""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    elif value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.strftime(CANONICAL_DATE_FORMAT)


def format_date_value(value: Any) -> str:
    """Normalise an ISO-8601 date; unparseable text is returned as-is."""
    if value is None:
        return ""
    if isinstance(value, (datetime, date)):
        return render_datetime(value)
    text = str(value)
    if not text:
        return ""
    try:
        return render_datetime(datetime.fromisoformat(text))
    except (ValueError, OverflowError):
        logger.debug("caml_filter.date_unparsed", value=text)
        return text


def evaluate_date_expression(expression: str, now: datetime) -> str:
    """Resolve ``[Today]`` markers in *expression* relative to *now*.

    The first ``[Today] +/- N`` (``N`` optionally bracketed) is replaced by
    *now* shifted by ``N`` days, then the first remaining bare ``[Today]`` is
    replaced by *now* itself.
    """

    def _offset(match: re.Match[str]) -> str:
        try:
            days = int(match.group(2))
            if match.group(1) == "-":
                days = -days
            return render_datetime(now + timedelta(days=days))
        except (OverflowError, ValueError):
            logger.debug("caml_filter.date_offset_out_of_range", expression=match.group(0))
            return match.group(0)

    result = TODAY_OFFSET.sub(_offset, expression, count=1)
    return result.replace(TODAY_MARKER, render_datetime(now), 1)


def format_text_value(value: Any, context: CompileContext) -> str:
    if value is None:
        return ""
    return substitute_parameters(str(value), context.query_string)


class ValueFormatter:
    """Turns a scalar ``FilterCondition`` into its ``<Value>`` content."""

    def __init__(self, context: CompileContext | None = None) -> None:
        self._context = context or CompileContext()

    @property
    def context(self) -> CompileContext:
        return self._context

    def format(self, condition: FilterCondition) -> str:
        if condition.field_type is FieldType.DATETIME:
            if condition.expression:
                return evaluate_date_expression(condition.expression, self._context.clock.now())
            return format_date_value(condition.value)
        return format_text_value(condition.value, self._context)


__all__ = [
    "CANONICAL_DATE_FORMAT",
    "ValueFormatter",
    "evaluate_date_expression",
    "format_date_value",
    "format_text_value",
    "render_datetime",
]
