"""DDD building blocks — public re-export surface."""

from mongo_event_store.kernel.ddd.aggregate import AggregateRoot
from mongo_event_store.kernel.ddd.domain_event import DomainEvent
from mongo_event_store.kernel.ddd.entity import Entity
from mongo_event_store.kernel.ddd.protocols import (
    EventClass,
    EventSourcedAggregate,
    RecordedEvent,
)

__all__ = [
    "AggregateRoot",
    "DomainEvent",
    "Entity",
    "EventClass",
    "EventSourcedAggregate",
    "RecordedEvent",
]
