"""Application feature flags – FeatureFlag aggregate root."""
from __future__ import annotations

import enum
from collections.abc import Mapping
from types import MappingProxyType

from flagengine.kernel.errors import InvalidArgumentError


class OverrideKind(str, enum.Enum):
    """Audience tier an override applies to."""

    USER = "user"
    GROUP = "group"
    REGION = "region"

    @property
    def label(self) -> str:
        return self.value.capitalize()


def _require_text(value: str | None, argument: str, label: str) -> str:
    if value is None or not value.strip():
        raise InvalidArgumentError(argument, f"{label} cannot be empty.")
    return value


class FeatureFlag:
    """Named boolean toggle with a global default and three override tiers.

    Equality is identity-based (by ``name``).  Overrides are kept as one
    ``{target_id: is_enabled}`` mapping per :class:`OverrideKind`, so each
    target id appears at most once per kind.
    """

    def __init__(self, name: str, is_enabled: bool, description: str | None = None) -> None:
        self._name = _require_text(name, "name", "Feature flag name").strip()
        self.is_enabled = is_enabled
        self.description = description
        self._overrides: dict[OverrideKind, dict[str, bool]] = {kind: {} for kind in OverrideKind}

    @property
    def name(self) -> str:
        return self._name

    def overrides(self, kind: OverrideKind) -> Mapping[str, bool]:
        """Read-only view of the overrides for *kind*, in insertion order."""
        return MappingProxyType(self._overrides[kind])

    def override_for(self, kind: OverrideKind, target_id: str | None) -> bool | None:
        """Return the override value for *target_id*, or ``None`` when unset."""
        if not target_id:
            return None
        return self._overrides[kind].get(target_id)

    def set_override(self, kind: OverrideKind, target_id: str, is_enabled: bool) -> None:
        """Create or update the override for *target_id* (upsert)."""
        target_id = _require_text(target_id, f"{kind.value}_id", f"{kind.label} ID")
        self._overrides[kind][target_id] = is_enabled

    def remove_override(self, kind: OverrideKind, target_id: str) -> bool:
        """Remove the override for *target_id*; ``False`` when none existed."""
        target_id = _require_text(target_id, f"{kind.value}_id", f"{kind.label} ID")
        return self._overrides[kind].pop(target_id, None) is not None

    @property
    def user_overrides(self) -> Mapping[str, bool]:
        return self.overrides(OverrideKind.USER)

    @property
    def group_overrides(self) -> Mapping[str, bool]:
        return self.overrides(OverrideKind.GROUP)

    @property
    def region_overrides(self) -> Mapping[str, bool]:
        return self.overrides(OverrideKind.REGION)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}(name={self._name!r}, is_enabled={self.is_enabled!r})"


__all__ = ["FeatureFlag", "OverrideKind"]
