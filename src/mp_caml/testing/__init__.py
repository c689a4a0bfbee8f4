"""Testing support – fakes, builders and hypothesis strategies.

Import fixtures in your ``conftest.py``::

    pytest_plugins = ["mp_caml.testing.fixtures"]
"""

from mp_caml.testing.fakes import FAKE_NOW, FAKE_TODAY, FakeClock, FrozenClock, MappingQueryString
from mp_caml.testing.generators import (
    FilterConditionBuilder,
    filter_condition_strategy,
    filter_list_strategy,
    query_settings_strategy,
    taxonomy_term_strategy,
)

__all__ = [
    "FAKE_NOW",
    "FAKE_TODAY",
    "FakeClock",
    "FilterConditionBuilder",
    "FrozenClock",
    "MappingQueryString",
    "filter_condition_strategy",
    "filter_list_strategy",
    "query_settings_strategy",
    "taxonomy_term_strategy",
]
