"""
mp_caml – CAML query generation for list-query web parts.

Import path convention::

    from mp_caml.kernel.query import FilterCondition, QuerySettings
    from mp_caml.application.caml import CompileContext, generate_caml_query
    from mp_caml.config import QuerySettingsMapper
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
