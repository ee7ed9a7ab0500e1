"""Application cache – CacheKey builder."""
from __future__ import annotations

__all__ = ["CacheKey"]


class CacheKey:
    """Factory for deterministic cache key strings."""

    @staticmethod
    def for_resource(resource_type: str, resource_id: str | int) -> str:
        return f"{resource_type}:{resource_id}"

    @staticmethod
    def for_collection(resource_type: str) -> str:
        # plural namespace: never collides with a ``for_resource`` key
        return f"{resource_type}s:all"
