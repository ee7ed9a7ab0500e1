"""Application feature flags – FeatureFlagRepository port."""
from __future__ import annotations

import abc

from flagengine.application.feature_flags.feature_flag import FeatureFlag


class FeatureFlagRepository(abc.ABC):
    """Port: load and persist whole flag aggregates by name.

    Every call reads or writes the flag together with all of its overrides.
    Concrete implementations live in ``adapters/memory`` and
    ``adapters/sqlalchemy``; :class:`CachedFeatureFlagRepository` decorates
    any of them.
    """

    @abc.abstractmethod
    async def get_by_name(self, name: str) -> FeatureFlag | None: ...

    @abc.abstractmethod
    async def get_all(self) -> list[FeatureFlag]: ...

    @abc.abstractmethod
    async def add(self, flag: FeatureFlag) -> None:
        """Insert a new flag; raises ``FlagAlreadyExistsError`` on a taken name."""

    @abc.abstractmethod
    async def update(self, flag: FeatureFlag) -> None:
        """Replace the stored aggregate; raises ``FlagNotFoundError`` if absent."""

    @abc.abstractmethod
    async def delete(self, name: str) -> None:
        """Delete the flag and its overrides; a no-op when absent."""

    @abc.abstractmethod
    async def exists(self, name: str) -> bool: ...


__all__ = ["FeatureFlagRepository"]
