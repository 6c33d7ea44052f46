"""MongoDB adapter — MongoEventStore."""

from __future__ import annotations

from typing import Any

from bson.errors import InvalidDocument
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from mongo_event_store.application.event_sourcing.describer import EventDescriber
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
from mongo_event_store.kernel.ddd.protocols import EventSourcedAggregate
from mongo_event_store.kernel.types.result import Err, Ok, Result
from mongo_event_store.observability.logging import get_logger

# Invalid-argument class (bad document) and runtime/transport class (PyMongoError).
_WRITE_ERRORS: tuple[type[BaseException], ...] = (
    InvalidDocument,
    PyMongoError,
    TypeError,
    ValueError,
)


class MongoEventStore(EventStore):
    """Append-only event store backed by a MongoDB collection.

    One document per event::

        {
            "aggregateRootId": "<id>",
            "type": "invoice-was-created",
            "payload": {...},
            "recordedAt": "2026-01-01T12:00:00+00:00",
            "microseconds": 123456,
        }

    ``recordedAt`` only carries whole seconds, so ``load`` sorts on
    ``(recordedAt, microseconds)`` and finally on ``_id``, which keeps
    events written by one client within the same microsecond in insertion
    order.

    Writes are one ``insert_one`` per event with no transaction: a
    failing ``save`` may leave the earlier events of the buffer stored.
    There is no optimistic concurrency check.

    Call :meth:`create_indexes` once on startup.
    """

    SORT: SortSpec = (
        ("recordedAt", ASCENDING),
        ("microseconds", ASCENDING),
        ("_id", ASCENDING),
    )

    def __init__(
        self,
        collection: EventCollection,
        registry: EventTypeRegistry,
        describer: EventDescriber | None = None,
    ) -> None:
        self._col = collection
        self._registry = registry
        self._describer = describer or registry.describer
        self._log = get_logger(__name__)

    @classmethod
    def from_client(
        cls,
        client: Any,
        database_name: str,
        collection_name: str,
        registry: EventTypeRegistry,
        describer: EventDescriber | None = None,
    ) -> "MongoEventStore":
        collection = client.get_database(database_name).get_collection(collection_name)
        return cls(collection, registry, describer)

    # ------------------------------------------------------------------
    # Index management
    # ------------------------------------------------------------------

    @classmethod
    def create_indexes(cls, collection: Any) -> None:
        """Create the ``(aggregateRootId, recordedAt, microseconds)`` index.

        Safe to call repeatedly.
        """
        collection.create_index(
            [("aggregateRootId", ASCENDING), ("recordedAt", ASCENDING), ("microseconds", ASCENDING)],
            name="idx_aggregate_recorded_at",
        )

    # ------------------------------------------------------------------
    # EventStore interface
    # ------------------------------------------------------------------

    def save(self, aggregate: EventSourcedAggregate) -> Result[None, EventStoreError]:
        aggregate_root_id = str(aggregate.get_aggregate_root_id())
        log = self._log.bind(aggregate_root_id=aggregate_root_id)
        events = aggregate.get_events()
        log.debug("event_store.save.started", pending=len(events))

        for position, event in enumerate(events):
            record = StoredEventRecord.from_event(
                aggregate_root_id, self._describer.describe(event), event
            )
            try:
                self._col.insert_one(record.to_document())
            except _WRITE_ERRORS as exc:
                log.error(
                    "event_store.save.failed",
                    event_type=record.type,
                    position=position,
                    error=repr(exc),
                )
                return Err(EventStorageFailedError(aggregate_root_id, cause=exc))
            log.debug("event_store.event.inserted", event_type=record.type, position=position)

        log.info("event_store.save.completed", stored=len(events))
        return Ok(None)

    def load(self, aggregate: EventSourcedAggregate) -> Result[None, EventStoreError]:
        aggregate_root_id = aggregate.get_aggregate_root_id()
        log = self._log.bind(aggregate_root_id=str(aggregate_root_id))

        applied = 0
        try:
            documents = self._col.find(
                {"aggregateRootId": str(aggregate_root_id)}, sort=list(self.SORT)
            )
            for doc in documents:
                try:
                    record = StoredEventRecord.from_document(doc)
                    recorded_at = record.occurred_at
                except (KeyError, TypeError, ValueError) as exc:
                    return self._load_failed(
                        log,
                        EventRetrievalFailedError.for_aggregate(str(aggregate_root_id), exc),
                        applied,
                    )

                event_class = self._registry.resolve(record.type, self._describer)
                if event_class is None:
                    return self._load_failed(
                        log,
                        EventRetrievalFailedError.unknown_type(record.type, str(aggregate_root_id)),
                        applied,
                    )

                try:
                    event = event_class.from_payload(aggregate_root_id, record.payload, recorded_at)
                except (KeyError, TypeError, ValueError) as exc:
                    return self._load_failed(
                        log,
                        EventRetrievalFailedError.for_aggregate(str(aggregate_root_id), exc),
                        applied,
                    )

                aggregate.apply(event)
                applied += 1
        except PyMongoError as exc:
            return self._load_failed(
                log,
                EventRetrievalFailedError.for_aggregate(str(aggregate_root_id), exc),
                applied,
            )

        log.info("event_store.load.completed", applied=applied)
        return Ok(None)

    @staticmethod
    def _load_failed(log: Any, error: EventRetrievalFailedError, applied: int) -> Err[EventStoreError]:
        log.error("event_store.load.failed", applied=applied, error=error.message)
        return Err(error)


__all__ = ["MongoEventStore"]
