"""Runtime query-string parameters.

Filter values may embed ``[PageQueryString:name]`` markers that resolve
against the URL of the page hosting the query.
"""
from __future__ import annotations

import re
from typing import Mapping, Protocol, runtime_checkable
from urllib.parse import unquote_plus

from mp_caml.observability.logging import get_logger

logger = get_logger(__name__)

PAGE_QUERY_STRING_MARKER = re.compile(r"\[PageQueryString:([A-Za-z0-9_-]*)\]")


@runtime_checkable
class QueryStringLookup(Protocol):
    """Port: resolve a query-string parameter by name, ``None`` if absent."""

    def get(self, name: str) -> str | None: ...


class UrlQueryString:
    """Reads parameters straight out of a page URL.

    A parameter present without a value (``?flag&x=1``) resolves to ``""``.
    Values are percent-decoded with ``+`` read as a space.
    """

    def __init__(self, url: str | None) -> None:
        self._url = url or ""

    @property
    def url(self) -> str:
        return self._url

    def get(self, name: str) -> str | None:
        if not self._url:
            return None
        pattern = re.compile(r"[?&]" + re.escape(name) + r"(=([^&#]*)|&|#|$)")
        match = pattern.search(self._url)
        if match is None:
            return None
        raw = match.group(2)
        if not raw:
            return ""
        return unquote_plus(raw)

    def __repr__(self) -> str:
        return f"UrlQueryString({self._url!r})"


class MappingQueryString:
    """Lookup over an already parsed ``{name: value}`` mapping."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, name: str) -> str | None:
        value = self._values.get(name)
        return None if value is None else str(value)


class EmptyQueryString:
    """No hosting page: every parameter is absent."""

    def get(self, name: str) -> str | None:  # noqa: ARG002
        return None


def substitute_parameters(text: str, lookup: QueryStringLookup) -> str:
    """Replace every ``[PageQueryString:name]`` marker in *text*.

    Missing parameters are replaced by an empty string.
    """

    def _resolve(match: re.Match[str]) -> str:
        name = match.group(1)
        value = lookup.get(name)
        if value is None:
            logger.debug("caml_filter.parameter_missing", parameter=name)
            return ""
        return value

    return PAGE_QUERY_STRING_MARKER.sub(_resolve, text)


__all__ = [
    "PAGE_QUERY_STRING_MARKER",
    "EmptyQueryString",
    "MappingQueryString",
    "QueryStringLookup",
    "UrlQueryString",
    "substitute_parameters",
]
