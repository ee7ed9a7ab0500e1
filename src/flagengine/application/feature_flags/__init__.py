"""Application feature flags – aggregate, evaluation engine, repository port and service."""
from flagengine.application.feature_flags.errors import (
    FlagAlreadyExistsError,
    FlagNotFoundError,
    OverrideNotFoundError,
)
from flagengine.application.feature_flags.evaluation import (
    Evaluation,
    EvaluationContext,
    evaluate,
    resolve,
)
from flagengine.application.feature_flags.feature_flag import FeatureFlag, OverrideKind
from flagengine.application.feature_flags.record import (
    FlagRecord,
    OverrideRecord,
    from_record,
    to_record,
)
from flagengine.application.feature_flags.repository import FeatureFlagRepository
from flagengine.application.feature_flags.service import FeatureFlagService

__all__ = [
    "Evaluation",
    "EvaluationContext",
    "FeatureFlag",
    "FeatureFlagRepository",
    "FeatureFlagService",
    "FlagAlreadyExistsError",
    "FlagNotFoundError",
    "FlagRecord",
    "OverrideKind",
    "OverrideNotFoundError",
    "OverrideRecord",
    "evaluate",
    "from_record",
    "resolve",
    "to_record",
]
