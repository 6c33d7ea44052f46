"""AggregateRoot — buffers recorded events and replays stored ones."""

from __future__ import annotations

from datetime import datetime

from mongo_event_store.kernel.ddd.domain_event import DomainEvent
from mongo_event_store.kernel.ddd.entity import Entity
from mongo_event_store.kernel.errors import InvariantViolationError
from mongo_event_store.kernel.naming import to_snake_case
from mongo_event_store.kernel.time.clock import Clock, SystemClock
from mongo_event_store.kernel.types.ids import EntityId


class AggregateRoot(Entity):
    """Event-sourced aggregate root.

    State changes go through events. :meth:`record_that` mutates state
    and appends the event to the pending buffer; :meth:`apply` only
    mutates, which is what replay from an event store uses.

    Mutation is dispatched to ``apply_<snake_case_event_name>``::

        class Order(AggregateRoot):
            def place(self) -> None:
                self.record_that(OrderPlaced(aggregate_root_id=self.id, recorded_at=self._now()))

            def apply_order_placed(self, event: OrderPlaced) -> None:
                self.placed = True
    """

    _events: list[DomainEvent]

    def __init__(self, id: EntityId, clock: Clock | None = None) -> None:  # noqa: A002
        super().__init__(id)
        self._events = []
        self._clock = clock or SystemClock()

    def get_aggregate_root_id(self) -> EntityId:
        return self._id

    def get_events(self) -> list[DomainEvent]:
        """Return a copy of the pending (not yet persisted) events."""
        return list(self._events)

    def record_that(self, event: DomainEvent) -> None:
        """Apply *event* and buffer it for persistence."""
        self.apply(event)
        self._events.append(event)

    def apply(self, event: DomainEvent) -> None:
        """Mutate state from *event* without buffering it."""
        handler = getattr(self, f"apply_{to_snake_case(type(event).__name__)}", None)
        if handler is None:
            raise InvariantViolationError(
                f"{type(self).__name__} cannot apply {type(event).__name__}",
                aggregate=type(self).__name__,
            )
        handler(event)

    def clear_events(self) -> None:
        self._events.clear()

    def _now(self) -> datetime:
        return self._clock.now()


__all__ = ["AggregateRoot"]
