"""Application cache – TTL cache store and the cached flag repository."""
from flagengine.application.cache.keys import CacheKey
from flagengine.application.cache.repository import DEFAULT_TTL_SECONDS, CachedFeatureFlagRepository
from flagengine.application.cache.store import CacheStore, InMemoryCacheStore

__all__ = [
    "DEFAULT_TTL_SECONDS",
    "CacheKey",
    "CacheStore",
    "CachedFeatureFlagRepository",
    "InMemoryCacheStore",
]
