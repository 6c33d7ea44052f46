"""Application event sourcing – StoredEventRecord."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any, Mapping

from mongo_event_store.kernel.ddd.protocols import RecordedEvent
from mongo_event_store.kernel.time.precision import join_recorded_at, split_recorded_at


@dataclasses.dataclass(frozen=True)
class StoredEventRecord:
    """An event as persisted in the event store.

    The document layout (``aggregateRootId``, ``type``, ``payload``,
    ``recordedAt``, ``microseconds``) is a format contract shared with
    every reader of the collection.
    """

    aggregate_root_id: str
    """Canonical string of the owning aggregate's id."""

    type: str
    """Label produced by the describer for the event class."""

    payload: dict[str, Any]
    """Event data, opaque to the store."""

    recorded_at: str
    """ISO-8601 instant truncated to the second, with UTC offset."""

    microseconds: int
    """Sub-second component of the instant, ``0..999999``."""

    @classmethod
    def from_event(
        cls, aggregate_root_id: str, label: str, event: RecordedEvent
    ) -> "StoredEventRecord":
        recorded_at, microseconds = split_recorded_at(event.get_recorded_at())
        return cls(
            aggregate_root_id=aggregate_root_id,
            type=label,
            payload=dict(event.get_payload()),
            recorded_at=recorded_at,
            microseconds=microseconds,
        )

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "StoredEventRecord":
        """Build a record from a stored document; extra keys such as ``_id`` are ignored.

        Raises:
            KeyError: a required key is missing.
            TypeError: a value has the wrong type.
        """
        payload = doc["payload"]
        if not isinstance(payload, Mapping):
            raise TypeError(f"payload must be a mapping, got {type(payload).__name__}")
        return cls(
            aggregate_root_id=str(doc["aggregateRootId"]),
            type=str(doc["type"]),
            payload=dict(payload),
            recorded_at=str(doc["recordedAt"]),
            microseconds=doc["microseconds"],
        )

    def to_document(self) -> dict[str, Any]:
        return {
            "aggregateRootId": self.aggregate_root_id,
            "type": self.type,
            "payload": self.payload,
            "recordedAt": self.recorded_at,
            "microseconds": self.microseconds,
        }

    @property
    def occurred_at(self) -> datetime:
        """The precise instant, rebuilt from both timestamp halves."""
        return join_recorded_at(self.recorded_at, self.microseconds)


__all__ = ["StoredEventRecord"]
