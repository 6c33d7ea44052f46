"""Testing support – fakes for unit tests."""

from mongo_event_store.testing.fakes import (
    FakeClock,
    FrozenClock,
    InMemoryEventCollection,
)

__all__ = [
    "FakeClock",
    "FrozenClock",
    "InMemoryEventCollection",
]
