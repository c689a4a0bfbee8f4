"""CamlQueryBuilder – assembles the full ``<View>`` document."""
from __future__ import annotations

from mp_caml.application.caml import markup
from mp_caml.application.caml.context import CompileContext
from mp_caml.application.caml.filters import FilterCompiler
from mp_caml.kernel.query import QuerySettings, SortDirection, sort_by_index
from mp_caml.observability.logging import get_logger

logger = get_logger(__name__)


class CamlQueryBuilder:
    """Build a CAML view definition from :class:`QuerySettings`.

    Sections are emitted in a fixed order: ``<Query>`` (holding ``<Where>``
    and ``<OrderBy>``), ``<RowLimit>``, ``<ViewFields>``, all wrapped in
    ``<View>``. Absent settings simply omit their section; ``<Query>`` is
    always present, even when empty.
    """

    def __init__(self, context: CompileContext | None = None) -> None:
        self._context = context or CompileContext()
        self._filters = FilterCompiler(self._context)

    def build(self, settings: QuerySettings) -> str:
        query = ""

        if settings.filters:
            ordered = sort_by_index(settings.filters)
            query += markup.element("Where", self._filters.compile(ordered))

        if settings.order_by:
            ascending = settings.order_by_direction is not SortDirection.DESC
            query += markup.order_by(settings.order_by, ascending)

        query = markup.element("Query", query)

        if settings.limit_enabled:
            limit = "" if settings.item_limit is None else str(settings.item_limit)
            query += markup.element("RowLimit", limit)

        if settings.view_fields:
            query += markup.view_fields(settings.view_fields)

        document = markup.view(query, recursive=settings.recursive_enabled)
        logger.debug(
            "caml_query.generated",
            filters=len(settings.filters),
            view_fields=len(settings.view_fields),
            length=len(document),
        )
        return document


def generate_caml_query(settings: QuerySettings, context: CompileContext | None = None) -> str:
    """Shorthand for ``CamlQueryBuilder(context).build(settings)``."""
    return CamlQueryBuilder(context).build(settings)


__all__ = ["CamlQueryBuilder", "generate_caml_query"]
