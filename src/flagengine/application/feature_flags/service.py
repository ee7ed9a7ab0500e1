"""Application feature flags – FeatureFlagService use cases."""
from __future__ import annotations

from flagengine.application.feature_flags.errors import (
    FlagAlreadyExistsError,
    FlagNotFoundError,
    OverrideNotFoundError,
)
from flagengine.application.feature_flags.evaluation import EvaluationContext, resolve
from flagengine.application.feature_flags.feature_flag import FeatureFlag, OverrideKind
from flagengine.application.feature_flags.repository import FeatureFlagRepository
from flagengine.observability.logging import get_logger

logger = get_logger(__name__)


class FeatureFlagService:
    """Orchestrates a :class:`FeatureFlagRepository` and the evaluation engine.

    Every operation is a single load → validate → mutate/compute → persist
    sequence; there are no cross-flag transactions.
    """

    def __init__(self, repository: FeatureFlagRepository) -> None:
        self._repository = repository

    async def create(self, name: str, is_enabled: bool, description: str | None = None) -> FeatureFlag:
        flag = FeatureFlag(name, is_enabled, description)
        if await self._repository.exists(flag.name):
            raise FlagAlreadyExistsError(flag.name)
        await self._repository.add(flag)
        logger.info("flag.created", flag=flag.name, is_enabled=is_enabled)
        return flag

    async def get(self, name: str) -> FeatureFlag:
        flag = await self._repository.get_by_name(name)
        if flag is None:
            raise FlagNotFoundError(name)
        return flag

    async def get_all(self) -> list[FeatureFlag]:
        return await self._repository.get_all()

    async def update_global_state(self, name: str, is_enabled: bool) -> None:
        flag = await self.get(name)
        flag.is_enabled = is_enabled
        await self._repository.update(flag)
        logger.info("flag.global_state_updated", flag=name, is_enabled=is_enabled)

    async def set_override(
        self, kind: OverrideKind, name: str, target_id: str, is_enabled: bool
    ) -> None:
        flag = await self.get(name)
        flag.set_override(kind, target_id, is_enabled)
        await self._repository.update(flag)
        logger.info(
            "flag.override_set", flag=name, kind=kind.value, target_id=target_id, is_enabled=is_enabled
        )

    async def remove_override(self, kind: OverrideKind, name: str, target_id: str) -> None:
        flag = await self.get(name)
        if not flag.remove_override(kind, target_id):
            raise OverrideNotFoundError(kind, name, target_id)
        await self._repository.update(flag)
        logger.info("flag.override_removed", flag=name, kind=kind.value, target_id=target_id)

    async def evaluate(self, name: str, context: EvaluationContext) -> bool:
        flag = await self.get(name)
        result = resolve(flag, context)
        logger.debug(
            "flag.evaluated",
            flag=name,
            is_enabled=result.is_enabled,
            tier=result.tier,
            target_id=result.target_id,
        )
        return result.is_enabled

    async def delete(self, name: str) -> None:
        if not await self._repository.exists(name):
            raise FlagNotFoundError(name)
        await self._repository.delete(name)
        logger.info("flag.deleted", flag=name)


__all__ = ["FeatureFlagService"]
