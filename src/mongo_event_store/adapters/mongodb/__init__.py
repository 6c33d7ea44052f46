"""MongoDB adapter — event store, settings, factory.

Requires ``pymongo``.
"""

from mongo_event_store.adapters.mongodb.event_store import MongoEventStore
from mongo_event_store.adapters.mongodb.factory import create_event_store
from mongo_event_store.adapters.mongodb.settings import MongoEventStoreSettings

__all__ = [
    "MongoEventStore",
    "MongoEventStoreSettings",
    "create_event_store",
]
