"""Application cache – CacheStore port and TTL-aware in-memory implementation."""
from __future__ import annotations

from collections import OrderedDict
from typing import Any, Protocol, runtime_checkable

from flagengine.kernel.time import Clock, SystemClock

__all__ = ["CacheStore", "InMemoryCacheStore"]


@runtime_checkable
class CacheStore(Protocol):
    async def get(self, key: str) -> Any: ...
    async def set(self, key: str, value: Any, ttl: float) -> None: ...
    async def delete(self, key: str) -> None: ...
    async def clear(self) -> None: ...


class InMemoryCacheStore:
    """Process-wide keyed cache with per-entry TTL.

    ``max_entries`` bounds the number of live entries (``0`` means
    unbounded); when full, the entry written longest ago is evicted.  Each
    operation touches a single key, so no locking is needed on one event loop.
    """

    def __init__(self, max_entries: int = 0, clock: Clock | None = None) -> None:
        if max_entries < 0:
            raise ValueError("max_entries must be >= 0")
        self._max_entries = max_entries
        self._clock: Clock = clock or SystemClock()
        self._data: OrderedDict[str, tuple[Any, float]] = OrderedDict()

    async def get(self, key: str) -> Any:
        entry = self._data.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock.timestamp() >= expires_at:
            self._data.pop(key, None)
            return None
        return value

    async def set(self, key: str, value: Any, ttl: float) -> None:
        self._data.pop(key, None)
        self._data[key] = (value, self._clock.timestamp() + ttl)
        if self._max_entries:
            while len(self._data) > self._max_entries:
                self._data.popitem(last=False)

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    async def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)
