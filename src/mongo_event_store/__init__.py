"""
mongo_event_store – append-only event storage for event-sourced aggregates.

Import path convention::

    from mongo_event_store.adapters.mongodb import MongoEventStore
    from mongo_event_store.application.event_sourcing import EventTypeRegistry
    from mongo_event_store.kernel.ddd import AggregateRoot, DomainEvent
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
