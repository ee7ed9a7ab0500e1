"""Kernel time – Clock port and implementations."""
from flagengine.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
