"""Application feature flags – raw storage records.

Storage adapters persist and return :class:`FlagRecord` values; they never
construct :class:`FeatureFlag` directly.  :func:`from_record` re-validates
the record on the way back into the domain.
"""
from __future__ import annotations

import dataclasses

from flagengine.application.feature_flags.feature_flag import FeatureFlag, OverrideKind


@dataclasses.dataclass(frozen=True)
class OverrideRecord:
    kind: OverrideKind
    target_id: str
    is_enabled: bool


@dataclasses.dataclass(frozen=True)
class FlagRecord:
    """Immutable snapshot of a whole flag aggregate."""

    name: str
    is_enabled: bool
    description: str | None = None
    overrides: tuple[OverrideRecord, ...] = ()


def to_record(flag: FeatureFlag) -> FlagRecord:
    return FlagRecord(
        name=flag.name,
        is_enabled=flag.is_enabled,
        description=flag.description,
        overrides=tuple(
            OverrideRecord(kind, target_id, enabled)
            for kind in OverrideKind
            for target_id, enabled in flag.overrides(kind).items()
        ),
    )


def from_record(record: FlagRecord) -> FeatureFlag:
    flag = FeatureFlag(record.name, record.is_enabled, record.description)
    for override in record.overrides:
        flag.set_override(override.kind, override.target_id, override.is_enabled)
    return flag


__all__ = ["FlagRecord", "OverrideRecord", "from_record", "to_record"]
