"""CompileContext – the ambient reads a compilation is allowed to make."""
from __future__ import annotations

import dataclasses

from mp_caml.application.caml.parameters import EmptyQueryString, QueryStringLookup, UrlQueryString
from mp_caml.kernel.time import Clock, SystemClock


@dataclasses.dataclass(frozen=True)
class CompileContext:
    """Current time and page query string, threaded through every stage.

    Example::

        ctx = CompileContext.for_url("https://contoso/sites/hr?dept=IT")
        generate_caml_query(settings, ctx)
    """

    clock: Clock = dataclasses.field(default_factory=SystemClock)
    query_string: QueryStringLookup = dataclasses.field(default_factory=EmptyQueryString)

    @classmethod
    def for_url(cls, url: str | None, clock: Clock | None = None) -> "CompileContext":
        return cls(clock=clock or SystemClock(), query_string=UrlQueryString(url))


__all__ = ["CompileContext"]
