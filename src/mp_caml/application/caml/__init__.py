"""Application CAML – query document generation.

Usage::

    from mp_caml.application.caml import CompileContext, generate_caml_query

    xml = generate_caml_query(settings, CompileContext.for_url(page_url))
"""
from mp_caml.application.caml.context import CompileContext
from mp_caml.application.caml.filters import FilterCompiler, expand_contains_all
from mp_caml.application.caml.parameters import (
    EmptyQueryString,
    MappingQueryString,
    QueryStringLookup,
    UrlQueryString,
    substitute_parameters,
)
from mp_caml.application.caml.query import CamlQueryBuilder, generate_caml_query
from mp_caml.application.caml.values import (
    CANONICAL_DATE_FORMAT,
    ValueFormatter,
    evaluate_date_expression,
    format_date_value,
    format_text_value,
    render_datetime,
)

__all__ = [
    "CANONICAL_DATE_FORMAT",
    "CamlQueryBuilder",
    "CompileContext",
    "EmptyQueryString",
    "FilterCompiler",
    "MappingQueryString",
    "QueryStringLookup",
    "UrlQueryString",
    "ValueFormatter",
    "evaluate_date_expression",
    "expand_contains_all",
    "format_date_value",
    "format_text_value",
    "generate_caml_query",
    "render_datetime",
    "substitute_parameters",
]
