"""Application feature flags – precedence evaluation.

Pure functions over a :class:`FeatureFlag` and an :class:`EvaluationContext`;
nothing here performs I/O.  Precedence is strict and first-match wins::

    user override  >  first matching group override  >  region override  >  global default
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from flagengine.application.feature_flags.feature_flag import FeatureFlag, OverrideKind


@dataclasses.dataclass(frozen=True)
class EvaluationContext:
    """Who is asking.  Empty strings and ``None`` both mean "skip that tier"."""

    user_id: str | None = None
    group_ids: tuple[str, ...] = ()
    region_id: str | None = None

    @classmethod
    def of(
        cls,
        user_id: str | None = None,
        group_ids: Iterable[str] | None = None,
        region_id: str | None = None,
    ) -> "EvaluationContext":
        """Build a context from loosely-typed input, keeping group order."""
        return cls(user_id=user_id, group_ids=tuple(group_ids or ()), region_id=region_id)


@dataclasses.dataclass(frozen=True)
class Evaluation:
    """Outcome of an evaluation and the tier that decided it."""

    is_enabled: bool
    tier: str
    target_id: str | None = None


def resolve(flag: FeatureFlag, context: EvaluationContext) -> Evaluation:
    user_value = flag.override_for(OverrideKind.USER, context.user_id)
    if user_value is not None:
        return Evaluation(user_value, OverrideKind.USER.value, context.user_id)

    # caller order decides between groups, not any group priority
    for group_id in context.group_ids:
        group_value = flag.override_for(OverrideKind.GROUP, group_id)
        if group_value is not None:
            return Evaluation(group_value, OverrideKind.GROUP.value, group_id)

    region_value = flag.override_for(OverrideKind.REGION, context.region_id)
    if region_value is not None:
        return Evaluation(region_value, OverrideKind.REGION.value, context.region_id)

    return Evaluation(flag.is_enabled, "global")


def evaluate(flag: FeatureFlag, context: EvaluationContext) -> bool:
    """Return whether *flag* is on for *context*."""
    return resolve(flag, context).is_enabled


__all__ = ["Evaluation", "EvaluationContext", "evaluate", "resolve"]
