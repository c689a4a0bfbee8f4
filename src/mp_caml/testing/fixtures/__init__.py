"""Testing fixtures – pytest fixtures for deterministic compilation.

Register in your ``conftest.py``::

    pytest_plugins = ["mp_caml.testing.fixtures"]
"""
from mp_caml.testing.fixtures.clock import caml_context, fake_clock

__all__ = ["caml_context", "fake_clock"]
