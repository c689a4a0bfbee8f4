"""Kernel time – Clock port + implementations."""
from mp_caml.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
