"""Testing fakes – deterministic doubles for ambient reads."""
from mp_caml.application.caml import MappingQueryString
from mp_caml.kernel.time import FrozenClock
from mp_caml.testing.fakes.clock import FAKE_NOW, FAKE_TODAY, FakeClock

__all__ = ["FAKE_NOW", "FAKE_TODAY", "FakeClock", "FrozenClock", "MappingQueryString"]
