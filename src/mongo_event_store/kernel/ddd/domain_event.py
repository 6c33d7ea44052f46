"""Domain events recorded by event-sourced aggregates."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any, ClassVar, Mapping, Self

from mongo_event_store.kernel.time.clock import utc_now
from mongo_event_store.kernel.types.ids import EntityId


@dataclasses.dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Base class for domain events.

    Subclasses add their own payload fields. The default
    :meth:`get_payload` / :meth:`from_payload` pair maps those fields
    one-to-one; override both when a field is not BSON-friendly.

    Example::

        @dataclasses.dataclass(frozen=True, kw_only=True)
        class OrderPlaced(DomainEvent):
            order_number: str
    """

    _ENVELOPE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"aggregate_root_id", "recorded_at"}
    )

    aggregate_root_id: EntityId
    recorded_at: datetime = dataclasses.field(default_factory=utc_now)

    @property
    def event_type(self) -> str:
        return type(self).__name__

    def get_aggregate_root_id(self) -> EntityId:
        return self.aggregate_root_id

    def get_recorded_at(self) -> datetime:
        return self.recorded_at

    def get_payload(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if f.name not in self._ENVELOPE_FIELDS
        }

    @classmethod
    def from_payload(
        cls,
        aggregate_root_id: EntityId,
        payload: Mapping[str, Any],
        recorded_at: datetime,
    ) -> Self:
        return cls(aggregate_root_id=aggregate_root_id, recorded_at=recorded_at, **payload)


__all__ = ["DomainEvent"]
