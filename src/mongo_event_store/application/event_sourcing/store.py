"""Application event sourcing – EventStore port and backing collection protocol."""

from __future__ import annotations

import abc
from typing import Any, Iterable, Mapping, Protocol, Sequence

from mongo_event_store.application.event_sourcing.errors import EventStoreError
from mongo_event_store.kernel.ddd.protocols import EventSourcedAggregate
from mongo_event_store.kernel.types.result import Result

SortSpec = Sequence[tuple[str, int]]


class EventCollection(Protocol):
    """The slice of a document collection an event store needs.

    ``pymongo.collection.Collection`` satisfies it, as does
    :class:`mongo_event_store.testing.fakes.InMemoryEventCollection`.
    """

    def insert_one(self, document: Any) -> Any: ...

    def find(
        self,
        filter: Mapping[str, Any] | None = None,  # noqa: A002
        *,
        sort: SortSpec | None = None,
    ) -> Iterable[Mapping[str, Any]]: ...


class EventStore(abc.ABC):
    """Port — durable append-only event store.

    Both operations report failures as ``Err`` values instead of
    raising, so callers can match on the failure kind:

    - ``save`` → :class:`EventStorageFailedError`
    - ``load`` → :class:`EventRetrievalFailedError`
    """

    @abc.abstractmethod
    def save(self, aggregate: EventSourcedAggregate) -> Result[None, EventStoreError]:
        """Append the aggregate's pending events, one write per event, in order."""

    @abc.abstractmethod
    def load(self, aggregate: EventSourcedAggregate) -> Result[None, EventStoreError]:
        """Replay every stored event of the aggregate into it, oldest first."""


__all__ = ["EventCollection", "EventStore", "SortSpec"]
