"""Config – 12-factor settings and loaders."""

from mongo_event_store.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from mongo_event_store.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
