"""FastAPI adapter – request bodies and JSON views (camelCase on the wire)."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from flagengine.application.feature_flags import EvaluationContext, FeatureFlag


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateFlagRequest(_CamelModel):
    name: str
    is_enabled: bool
    description: str | None = None


class UpdateFlagRequest(_CamelModel):
    is_enabled: bool


class OverrideRequest(_CamelModel):
    is_enabled: bool


class EvaluateRequest(_CamelModel):
    user_id: str | None = None
    group_ids: list[str] | None = None
    region_id: str | None = None

    def to_context(self) -> EvaluationContext:
        return EvaluationContext.of(self.user_id, self.group_ids, self.region_id)


class EvaluateResponse(_CamelModel):
    flag_name: str
    is_enabled: bool


class UserOverrideView(_CamelModel):
    user_id: str
    is_enabled: bool


class GroupOverrideView(_CamelModel):
    group_id: str
    is_enabled: bool


class RegionOverrideView(_CamelModel):
    region_id: str
    is_enabled: bool


class FlagView(_CamelModel):
    name: str
    is_enabled: bool
    description: str | None = None
    user_overrides: list[UserOverrideView] = []
    group_overrides: list[GroupOverrideView] = []
    region_overrides: list[RegionOverrideView] = []

    @classmethod
    def from_flag(cls, flag: FeatureFlag) -> FlagView:
        return cls(
            name=flag.name,
            is_enabled=flag.is_enabled,
            description=flag.description,
            user_overrides=[
                UserOverrideView(user_id=k, is_enabled=v) for k, v in flag.user_overrides.items()
            ],
            group_overrides=[
                GroupOverrideView(group_id=k, is_enabled=v) for k, v in flag.group_overrides.items()
            ],
            region_overrides=[
                RegionOverrideView(region_id=k, is_enabled=v) for k, v in flag.region_overrides.items()
            ],
        )


__all__ = [
    "CreateFlagRequest",
    "EvaluateRequest",
    "EvaluateResponse",
    "FlagView",
    "GroupOverrideView",
    "OverrideRequest",
    "RegionOverrideView",
    "UpdateFlagRequest",
    "UserOverrideView",
]
