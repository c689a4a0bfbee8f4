"""CAML element templates.

Attribute quoting differs between templates (double quotes for comparison
and view scope, single quotes elsewhere). Output must stay byte-identical:
consumers compare documents verbatim.
"""
from __future__ import annotations

from typing import Iterable

_UNARY = '<{0}><FieldRef Name="{1}" /></{0}>'
_COMPARISON = '<{0}><FieldRef Name="{1}" /><Value {2} Type="{3}">{4}</Value></{0}>'
_INCLUDE_TIME = 'IncludeTimeValue="{0}"'
_MEMBERSHIP = "<In><FieldRef Name='{0}' LookupId='TRUE' /><Values>{1}</Values></In>"
_INTEGER_VALUE = "<Value Type='Integer'>{0}</Value>"
_CURRENT_USER = "<Eq><FieldRef Name='{0}' /><Value Type='Integer'><UserID /></Value></Eq>"
_ORDER_BY = "<OrderBy><FieldRef Name='{0}' Ascending='{1}' /></OrderBy>"
_VIEW_FIELD = "<FieldRef Name='{0}' />"
_ELEMENT = "<{0}>{1}</{0}>"
_RECURSIVE_VIEW = '<View Scope="RecursiveAll">{0}</View>'


def element(tag: str, content: str) -> str:
    return _ELEMENT.format(tag, content)


def unary(operator: str, field_name: str) -> str:
    return _UNARY.format(operator, field_name)


def comparison(operator: str, field_name: str, value_type: str, value: str, special: str = "") -> str:
    return _COMPARISON.format(operator, field_name, special, value_type, value)


def include_time(flag: bool) -> str:
    return _INCLUDE_TIME.format("true" if flag else "false")


def membership(field_name: str, ids: Iterable[object]) -> str:
    values = "".join(_INTEGER_VALUE.format(i) for i in ids)
    return _MEMBERSHIP.format(field_name, values)


def current_user(field_name: str) -> str:
    return _CURRENT_USER.format(field_name)


def order_by(field_name: str, ascending: bool) -> str:
    return _ORDER_BY.format(field_name, "TRUE" if ascending else "FALSE")


def view_fields(fields: Iterable[str]) -> str:
    return element("ViewFields", "".join(_VIEW_FIELD.format(f) for f in fields))


def view(content: str, recursive: bool = False) -> str:
    if recursive:
        return _RECURSIVE_VIEW.format(content)
    return element("View", content)


__all__ = [
    "comparison",
    "current_user",
    "element",
    "include_time",
    "membership",
    "order_by",
    "unary",
    "view",
    "view_fields",
]
