"""In-memory adapter – InMemoryFeatureFlagRepository."""
from __future__ import annotations

from flagengine.application.feature_flags import (
    FeatureFlag,
    FeatureFlagRepository,
    FlagAlreadyExistsError,
    FlagNotFoundError,
    FlagRecord,
    from_record,
    to_record,
)


class InMemoryFeatureFlagRepository(FeatureFlagRepository):
    """Flag store backed by a ``{name: FlagRecord}`` dict.

    Useful for tests and local runs; nothing is persisted.  Records are
    immutable, so a write replaces the whole aggregate and a delete drops
    its overrides with it.
    """

    def __init__(self) -> None:
        self._records: dict[str, FlagRecord] = {}

    async def get_by_name(self, name: str) -> FeatureFlag | None:
        record = self._records.get(name)
        return from_record(record) if record is not None else None

    async def get_all(self) -> list[FeatureFlag]:
        return [from_record(self._records[name]) for name in sorted(self._records)]

    async def add(self, flag: FeatureFlag) -> None:
        if flag.name in self._records:
            raise FlagAlreadyExistsError(flag.name)
        self._records[flag.name] = to_record(flag)

    async def update(self, flag: FeatureFlag) -> None:
        if flag.name not in self._records:
            raise FlagNotFoundError(flag.name)
        self._records[flag.name] = to_record(flag)

    async def delete(self, name: str) -> None:
        self._records.pop(name, None)

    async def exists(self, name: str) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)


__all__ = ["InMemoryFeatureFlagRepository"]
