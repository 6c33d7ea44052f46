"""Errors raised while loading or validating settings."""
from mongo_event_store.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """No value was found under ``key`` and the field has no default."""

    default_code = "missing_required_setting"

    def __init__(self, key: str) -> None:
        super().__init__(f"Missing required setting {key}", detail={"key": key})
        self.key = key


class InvalidSettingValueError(ConfigError):
    """``key`` holds a value the settings class cannot use."""

    default_code = "invalid_setting_value"

    def __init__(self, key: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid value {value!r} for setting {key}: {reason}", detail={"key": key})
        self.key = key
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
