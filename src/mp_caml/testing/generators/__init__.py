"""Testing generators – builders and hypothesis strategies."""
from mp_caml.testing.generators.builder import FilterConditionBuilder
from mp_caml.testing.generators.strategies import (
    SCALAR_FIELD_TYPES,
    field_name_strategy,
    filter_condition_strategy,
    filter_list_strategy,
    query_settings_strategy,
    taxonomy_term_strategy,
)

__all__ = [
    "SCALAR_FIELD_TYPES",
    "FilterConditionBuilder",
    "field_name_strategy",
    "filter_condition_strategy",
    "filter_list_strategy",
    "query_settings_strategy",
    "taxonomy_term_strategy",
]
