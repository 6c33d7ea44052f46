"""Application — Event Sourcing."""

from mongo_event_store.application.event_sourcing.describer import (
    ClassNameDescriber,
    EventDescriber,
    KebabCaseDescriber,
)
from mongo_event_store.application.event_sourcing.errors import (
    EventRetrievalFailedError,
    EventStorageFailedError,
    EventStoreError,
)
from mongo_event_store.application.event_sourcing.registry import EventTypeRegistry
from mongo_event_store.application.event_sourcing.store import (
    EventCollection,
    EventStore,
    SortSpec,
)
from mongo_event_store.application.event_sourcing.stored_event import StoredEventRecord

__all__ = [
    "ClassNameDescriber",
    "EventCollection",
    "EventDescriber",
    "EventRetrievalFailedError",
    "EventStorageFailedError",
    "EventStore",
    "EventStoreError",
    "EventTypeRegistry",
    "KebabCaseDescriber",
    "SortSpec",
    "StoredEventRecord",
]
