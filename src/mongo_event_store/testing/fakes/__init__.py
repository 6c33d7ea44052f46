"""Testing fakes – in-memory doubles for the event store's ports."""
from mongo_event_store.kernel.time import FrozenClock
from mongo_event_store.testing.fakes.clock import FakeClock
from mongo_event_store.testing.fakes.collection import InMemoryEventCollection, InsertOneResult

__all__ = [
    "FakeClock",
    "FrozenClock",
    "InMemoryEventCollection",
    "InsertOneResult",
]
