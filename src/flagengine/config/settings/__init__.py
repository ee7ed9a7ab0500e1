"""Config settings – 12-factor env-based configuration."""
from flagengine.config.settings.base import Settings
from flagengine.config.settings.engine import FlagEngineSettings
from flagengine.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "FlagEngineSettings", "Settings", "SettingsLoader"]
