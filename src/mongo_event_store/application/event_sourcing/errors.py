"""Application event sourcing – failures reported by event stores."""

from __future__ import annotations

from typing import Any

from mongo_event_store.kernel.errors.infrastructure import InfrastructureError


class EventStoreError(InfrastructureError):
    """Base class for event store failures."""

    default_code = "event_store_error"


class EventStorageFailedError(EventStoreError):
    """The backing store rejected or could not complete a write.

    Raised (or carried in an ``Err``) by ``save``. Events after the
    failing one were not attempted.
    """

    default_code = "event_storage_failed"

    def __init__(
        self,
        aggregate_root_id: str,
        *,
        cause: BaseException | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Failed to store Event(s) for Aggregate with AggregateRootId {aggregate_root_id}.",
            detail={"aggregate_root_id": aggregate_root_id},
            cause=cause,
            **kwargs,
        )
        self.aggregate_root_id = aggregate_root_id


class EventRetrievalFailedError(EventStoreError):
    """A stored event could not be turned back into a domain event.

    ``event_type`` is set when the stored label matched no registered
    event class; otherwise ``cause`` holds the underlying failure.
    """

    default_code = "event_retrieval_failed"

    def __init__(
        self,
        message: str,
        *,
        aggregate_root_id: str | None = None,
        event_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail: dict[str, Any] = {}
        if aggregate_root_id is not None:
            detail["aggregate_root_id"] = aggregate_root_id
        if event_type is not None:
            detail["event_type"] = event_type
        super().__init__(message, detail=detail, **kwargs)
        self.aggregate_root_id = aggregate_root_id
        self.event_type = event_type

    @classmethod
    def unknown_type(
        cls, event_type: str, aggregate_root_id: str | None = None
    ) -> "EventRetrievalFailedError":
        return cls(
            f"Could not find an Event class for type '{event_type}'.",
            aggregate_root_id=aggregate_root_id,
            event_type=event_type,
        )

    @classmethod
    def for_aggregate(
        cls, aggregate_root_id: str, cause: BaseException
    ) -> "EventRetrievalFailedError":
        return cls(
            f"Failed to retrieve Event(s) for Aggregate with AggregateRootId {aggregate_root_id}.",
            aggregate_root_id=aggregate_root_id,
            cause=cause,
        )


__all__ = ["EventRetrievalFailedError", "EventStorageFailedError", "EventStoreError"]
