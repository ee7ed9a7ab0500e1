"""Kernel time – Clock port, wall clock and a settable clock for tests.

The cache measures entry lifetimes with :meth:`Clock.timestamp`, so TTL
behaviour can be tested by advancing a :class:`FrozenClock` instead of
sleeping.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...
    def timestamp(self) -> float: ...


class SystemClock:
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def timestamp(self) -> float:
        return self.now().timestamp()


class FrozenClock:
    """Clock that only moves when :meth:`advance` is called."""

    def __init__(self, start: datetime) -> None:
        self._current = start

    def now(self) -> datetime:
        return self._current

    def timestamp(self) -> float:
        return self._current.timestamp()

    def advance(self, **delta: float) -> None:
        """Move forward by ``timedelta(**delta)``, e.g. ``advance(seconds=300)``."""
        self._current += timedelta(**delta)


__all__ = ["Clock", "FrozenClock", "SystemClock"]
