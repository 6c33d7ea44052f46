"""Structural contracts the event store consumes.

Any aggregate or event type that matches these shapes can be stored;
:class:`AggregateRoot` and :class:`DomainEvent` are one implementation.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

from mongo_event_store.kernel.types.ids import EntityId


@runtime_checkable
class RecordedEvent(Protocol):
    def get_payload(self) -> Mapping[str, Any]: ...
    def get_recorded_at(self) -> datetime: ...


class EventClass(Protocol):
    """A concrete event type: named, and buildable from a stored payload."""

    __name__: str

    def from_payload(
        self,
        aggregate_root_id: EntityId,
        payload: Mapping[str, Any],
        recorded_at: datetime,
    ) -> RecordedEvent: ...


@runtime_checkable
class EventSourcedAggregate(Protocol):
    def get_aggregate_root_id(self) -> EntityId: ...
    def get_events(self) -> Sequence[RecordedEvent]: ...
    def apply(self, event: Any) -> None: ...


__all__ = ["EventClass", "EventSourcedAggregate", "RecordedEvent"]
