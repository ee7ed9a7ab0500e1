"""Config settings – FlagEngineSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from flagengine.config.settings.base import Settings
from flagengine.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class FlagEngineSettings(Settings):
    """Runtime settings, read from ``FLAGENGINE_*`` environment variables."""

    _prefix: ClassVar[str] = "FLAGENGINE"

    database_url: str = "sqlite+aiosqlite:///featureflags.db"
    cache_ttl_seconds: float = 300.0
    cache_max_entries: int = 0
    log_level: str = "INFO"
    api_prefix: str = ""
    create_schema: bool = True
    host: str = "127.0.0.1"
    port: int = 8000

    def _validate(self) -> None:
        if not self.database_url:
            raise InvalidSettingValueError("database_url", self.database_url, "must not be empty")
        if self.cache_ttl_seconds <= 0:
            raise InvalidSettingValueError("cache_ttl_seconds", self.cache_ttl_seconds, "must be > 0")
        if self.cache_max_entries < 0:
            raise InvalidSettingValueError("cache_max_entries", self.cache_max_entries, "must be >= 0")
        if self.api_prefix and (not self.api_prefix.startswith("/") or self.api_prefix.endswith("/")):
            raise InvalidSettingValueError(
                "api_prefix", self.api_prefix, "must start with '/' and not end with '/'"
            )
        if not 0 < self.port < 65536:
            raise InvalidSettingValueError("port", self.port, "must be between 1 and 65535")


__all__ = ["FlagEngineSettings"]
