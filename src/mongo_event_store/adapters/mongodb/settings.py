"""MongoDB adapter — connection settings."""

from __future__ import annotations

import dataclasses

from mongo_event_store.config.settings.base import Settings
from mongo_event_store.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class MongoEventStoreSettings(Settings):
    """Where the event collection lives.

    Loaded from ``EVENT_STORE_URI``, ``EVENT_STORE_DATABASE_NAME``,
    ``EVENT_STORE_COLLECTION_NAME``, ``EVENT_STORE_SERVER_SELECTION_TIMEOUT_MS``
    and ``EVENT_STORE_TIMEOUT_MS`` by
    :class:`~mongo_event_store.config.EnvSettingsLoader`.
    """

    _prefix = "EVENT_STORE"

    uri: str
    collection_name: str
    database_name: str = "eventStore"
    server_selection_timeout_ms: int = 5000
    timeout_ms: int = 10_000
    """Client-side limit for each ``insert_one`` / ``find`` (pymongo ``timeoutMS``)."""

    def _validate(self) -> None:
        for name in ("uri", "database_name", "collection_name"):
            if not getattr(self, name):
                raise InvalidSettingValueError(self.env_key(name), getattr(self, name), "must not be empty")
        for name in ("server_selection_timeout_ms", "timeout_ms"):
            if getattr(self, name) <= 0:
                raise InvalidSettingValueError(self.env_key(name), getattr(self, name), "must be positive")


__all__ = ["MongoEventStoreSettings"]
