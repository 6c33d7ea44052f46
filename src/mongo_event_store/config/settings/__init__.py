"""Config settings – 12-factor env-based configuration."""
from mongo_event_store.config.settings.base import Settings
from mongo_event_store.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
