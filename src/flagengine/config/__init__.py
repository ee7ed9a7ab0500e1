"""Config – 12-factor settings for the flag engine."""
from flagengine.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    FlagEngineSettings,
    Settings,
    SettingsLoader,
)
from flagengine.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FlagEngineSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
