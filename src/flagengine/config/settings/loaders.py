"""Config settings – SettingsLoader port and its env / dotenv implementations."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Callable, TypeVar

from dotenv import load_dotenv

from flagengine.config.settings.base import Settings
from flagengine.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off", ""):
        return False
    raise ValueError(f"expected a boolean, got {raw!r}")


# field annotations are strings under ``from __future__ import annotations``
_PARSERS: dict[str, Callable[[str], Any]] = {
    "bool": _parse_bool,
    "int": int,
    "float": float,
    "str": str,
}


def _has_default(field: dataclasses.Field[Any]) -> bool:
    return field.default is not dataclasses.MISSING or field.default_factory is not dataclasses.MISSING


class SettingsLoader(abc.ABC):
    """Port: build a :class:`Settings` subclass from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read each dataclass field from ``<PREFIX>_<FIELD>`` in ``os.environ``.

    Unset variables fall back to the field default.  A value that cannot be
    parsed raises :class:`InvalidSettingValueError` naming the variable; a
    parsed value the settings class rejects surfaces as whatever
    :class:`ConfigError` its validation raised.
    """

    def load(self, settings_class: type[T]) -> T:
        prefix = settings_class._prefix.upper()
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            variable = f"{prefix}_{field.name.upper()}" if prefix else field.name.upper()
            raw = os.environ.get(variable)
            if raw is None:
                if not _has_default(field):
                    raise MissingRequiredSettingError(variable)
                continue
            values[field.name] = self._parse(variable, raw, field.type)

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def _parse(variable: str, raw: str, annotation: Any) -> Any:
        name = annotation if isinstance(annotation, str) else getattr(annotation, "__name__", "str")
        parser = _PARSERS.get(name, str)
        try:
            return parser(raw)
        except ValueError as exc:
            raise InvalidSettingValueError(variable, raw, str(exc)) from exc


class DotenvSettingsLoader(SettingsLoader):
    """Merge a ``.env`` file into the environment, then defer to :class:`EnvSettingsLoader`.

    Variables already set in the process environment win unless
    ``override`` is true.  A missing file is not an error.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
