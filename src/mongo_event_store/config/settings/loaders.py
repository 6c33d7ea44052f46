"""Config settings – loaders that build Settings dataclasses."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Mapping, TypeVar

from mongo_event_store.config.settings.base import Settings
from mongo_event_store.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


class SettingsLoader(abc.ABC):
    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Fill a :class:`Settings` dataclass from environment variables.

    Each field ``name`` is read from ``settings_class.env_key(name)``.
    ``int``, ``float`` and ``bool`` fields are converted; anything else
    is passed through as a string. Pass *environ* to read from a plain
    mapping instead of ``os.environ``.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def load(self, settings_class: type[T]) -> T:
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            key = settings_class.env_key(field.name)
            if key in self._environ:
                values[field.name] = self._convert(key, self._environ[key], field.type)
            elif _is_required(field):
                raise MissingRequiredSettingError(key)

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Cannot build {settings_class.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def _convert(key: str, raw: str, annotation: Any) -> Any:
        # Annotations are strings under ``from __future__ import annotations``.
        kind = annotation if isinstance(annotation, str) else getattr(annotation, "__name__", "")
        try:
            if kind == "bool":
                lowered = raw.strip().lower()
                if lowered not in _TRUE | _FALSE:
                    raise ValueError("expected a boolean (true/false, yes/no, on/off, 1/0)")
                return lowered in _TRUE
            if kind == "int":
                return int(raw)
            if kind == "float":
                return float(raw)
        except ValueError as exc:
            raise InvalidSettingValueError(key, raw, str(exc)) from exc
        return raw


def _is_required(field: dataclasses.Field[Any]) -> bool:
    return field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
