"""Kernel query – list field references."""
from __future__ import annotations

import dataclasses
from enum import Enum


class FieldType(str, Enum):
    """Closed set of list field types a filter can target.

    The first six members keep the ordinals used by serialized web-part
    property bags; the remainder extend the scalar types.
    """

    TEXT = "Text"
    NUMBER = "Number"
    DATETIME = "Datetime"
    LOOKUP = "Lookup"
    TAXONOMY = "Taxonomy"
    USER = "User"
    NOTE = "Note"
    CURRENCY = "Currency"
    INTEGER = "Integer"
    COUNTER = "Counter"
    BOOLEAN = "Boolean"
    CHOICE = "Choice"
    URL = "URL"

    @property
    def value_type(self) -> str:
        """``Type`` attribute emitted on a ``<Value>`` for this field."""
        if self is FieldType.LOOKUP:
            return FieldType.TEXT.value
        return self.value


@dataclasses.dataclass(frozen=True)
class FieldRef:
    """A list field addressed by its internal (non-display) name."""

    internal_name: str
    type: FieldType = FieldType.TEXT
    display_name: str = ""


__all__ = ["FieldRef", "FieldType"]
