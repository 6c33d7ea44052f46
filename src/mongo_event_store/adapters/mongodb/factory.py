"""MongoDB adapter — build a MongoEventStore from settings."""

from __future__ import annotations

from typing import Any

from pymongo import MongoClient

from mongo_event_store.adapters.mongodb.event_store import MongoEventStore
from mongo_event_store.adapters.mongodb.settings import MongoEventStoreSettings
from mongo_event_store.application.event_sourcing.describer import EventDescriber
from mongo_event_store.application.event_sourcing.registry import EventTypeRegistry
from mongo_event_store.observability.logging import get_logger

logger = get_logger(__name__)


def create_event_store(
    settings: MongoEventStoreSettings,
    registry: EventTypeRegistry,
    describer: EventDescriber | None = None,
    client: Any | None = None,
) -> MongoEventStore:
    """Return a store on ``settings.database_name.settings.collection_name``.

    A :class:`pymongo.MongoClient` is created from ``settings.uri`` unless
    *client* is given. Connecting is lazy; the first ``save`` or ``load``
    performs server selection.
    """
    if client is None:
        client = MongoClient(
            settings.uri,
            serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
            timeoutMS=settings.timeout_ms,
            tz_aware=True,
        )
    logger.info(
        "event_store.created",
        database=settings.database_name,
        collection=settings.collection_name,
        registered=len(registry),
    )
    return MongoEventStore.from_client(
        client,
        settings.database_name,
        settings.collection_name,
        registry,
        describer,
    )


__all__ = ["create_event_store"]
