"""Application cache – read-through, write-invalidate repository decorator."""
from __future__ import annotations

from typing import Any, Awaitable, Callable

from flagengine.application.cache.keys import CacheKey
from flagengine.application.cache.store import CacheStore
from flagengine.application.feature_flags.feature_flag import FeatureFlag
from flagengine.application.feature_flags.record import FlagRecord, from_record, to_record
from flagengine.application.feature_flags.repository import FeatureFlagRepository
from flagengine.observability.logging import get_logger

__all__ = ["DEFAULT_TTL_SECONDS", "CachedFeatureFlagRepository"]

logger = get_logger(__name__)

DEFAULT_TTL_SECONDS = 300.0
_RESOURCE = "flag"


class CachedFeatureFlagRepository(FeatureFlagRepository):
    """Wraps any :class:`FeatureFlagRepository` with a read-through cache.

    * Reads are served from *cache* until the entry's TTL runs out.  Only
      positive lookups are cached; a missing flag always reaches the store.
    * Writes go to the inner repository first and, once it returns,
      invalidate the flag's key and the listing key.  A failing write leaves
      the cache untouched.
    * ``exists`` is never cached.

    The cache holds immutable :class:`FlagRecord` snapshots, so callers that
    mutate a returned aggregate cannot change what other readers see.  A read
    that began before an invalidation does not repopulate the cache.
    """

    def __init__(
        self,
        inner: FeatureFlagRepository,
        cache: CacheStore,
        ttl: float = DEFAULT_TTL_SECONDS,
    ) -> None:
        if ttl <= 0:
            raise ValueError("ttl must be > 0")
        self._inner = inner
        self._cache = cache
        self._ttl = ttl
        self._generation = 0

    @staticmethod
    def key_for(name: str) -> str:
        return CacheKey.for_resource(_RESOURCE, name)

    @staticmethod
    def all_flags_key() -> str:
        return CacheKey.for_collection(_RESOURCE)

    async def get_by_name(self, name: str) -> FeatureFlag | None:
        record: FlagRecord | None = await self._read_through(
            self.key_for(name), lambda: self._load_one(name)
        )
        return from_record(record) if record is not None else None

    async def get_all(self) -> list[FeatureFlag]:
        records: tuple[FlagRecord, ...] = await self._read_through(
            self.all_flags_key(), self._load_all
        )
        return [from_record(record) for record in records]

    async def add(self, flag: FeatureFlag) -> None:
        await self._inner.add(flag)
        await self._invalidate(flag.name)

    async def update(self, flag: FeatureFlag) -> None:
        await self._inner.update(flag)
        await self._invalidate(flag.name)

    async def delete(self, name: str) -> None:
        await self._inner.delete(name)
        await self._invalidate(name)

    async def exists(self, name: str) -> bool:
        return await self._inner.exists(name)

    async def _load_one(self, name: str) -> FlagRecord | None:
        flag = await self._inner.get_by_name(name)
        return to_record(flag) if flag is not None else None

    async def _load_all(self) -> tuple[FlagRecord, ...]:
        return tuple(to_record(flag) for flag in await self._inner.get_all())

    async def _read_through(self, key: str, loader: Callable[[], Awaitable[Any]]) -> Any:
        cached = await self._cache.get(key)
        if cached is not None:
            logger.debug("flag_cache.hit", key=key)
            return cached

        logger.debug("flag_cache.miss", key=key)
        generation = self._generation
        value = await loader()
        if value is not None and generation == self._generation:
            await self._cache.set(key, value, self._ttl)
        return value

    async def _invalidate(self, name: str) -> None:
        self._generation += 1
        await self._cache.delete(self.key_for(name))
        await self._cache.delete(self.all_flags_key())
        logger.debug("flag_cache.invalidated", flag=name)
