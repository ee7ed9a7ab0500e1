"""Application feature flags – domain errors."""
from __future__ import annotations

from typing import Any

from flagengine.application.feature_flags.feature_flag import OverrideKind
from flagengine.kernel.errors import ConflictError, NotFoundError


class FlagNotFoundError(NotFoundError):
    """No flag is stored under the given name."""

    default_code = "flag_not_found"

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__("Feature flag", name, detail={"flag": name}, **kwargs)
        self.name = name


class OverrideNotFoundError(NotFoundError):
    """The flag exists but has no override for the given target."""

    default_code = "override_not_found"

    def __init__(self, kind: OverrideKind, flag_name: str, target_id: str, **kwargs: Any) -> None:
        super().__init__(
            f"{kind.label} override",
            target_id,
            detail={"flag": flag_name, "kind": kind.value, "target_id": target_id},
            **kwargs,
        )
        self.kind = kind
        self.flag_name = flag_name
        self.target_id = target_id


class FlagAlreadyExistsError(ConflictError):
    """A flag with the same name is already stored."""

    default_code = "already_exists"

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(
            f"A feature flag with name '{name}' already exists",
            detail={"flag": name},
            **kwargs,
        )
        self.name = name


__all__ = ["FlagAlreadyExistsError", "FlagNotFoundError", "OverrideNotFoundError"]
