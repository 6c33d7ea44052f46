"""Application event sourcing – EventTypeRegistry."""

from __future__ import annotations

from typing import Iterator

from mongo_event_store.application.event_sourcing.describer import (
    EventDescriber,
    KebabCaseDescriber,
)
from mongo_event_store.kernel.ddd.protocols import EventClass


class EventTypeRegistry:
    """The event classes a store can rebuild from stored records.

    One registry per bounded context, handed to the store that needs it.
    :meth:`register` *replaces* the contents; calling it with no
    arguments clears the registry.

    Labels are computed once, at registration time, with the registry's
    describer. When two classes share a label the one registered first
    wins.

    Example::

        registry = EventTypeRegistry(describer=KebabCaseDescriber())
        registry.register(InvoiceWasCreated, PaymentTransactionWasStarted)
        registry.resolve("invoice-was-created")  # -> InvoiceWasCreated

    No locking: configure once at startup and leave it alone while
    stores are in use.
    """

    def __init__(
        self,
        *event_types: EventClass,
        describer: EventDescriber | None = None,
    ) -> None:
        self._describer: EventDescriber = describer or KebabCaseDescriber()
        self._event_types: tuple[EventClass, ...] = ()
        self._by_label: dict[str, EventClass] = {}
        if event_types:
            self.register(*event_types)

    @property
    def describer(self) -> EventDescriber:
        return self._describer

    def register(self, *event_types: EventClass) -> None:
        """Set the registry to exactly *event_types*, in the given order."""
        by_label: dict[str, EventClass] = {}
        for event_type in event_types:
            by_label.setdefault(self._describer.describe(event_type), event_type)
        self._event_types = tuple(event_types)
        self._by_label = by_label

    def all_registered(self) -> tuple[EventClass, ...]:
        return self._event_types

    def resolve(self, label: str, describer: EventDescriber | None = None) -> EventClass | None:
        """Return the event class stored under *label*, or ``None``.

        A *describer* other than the registry's own is matched against
        the registered classes in registration order.
        """
        if describer is None or describer is self._describer:
            return self._by_label.get(label)
        return next((t for t in self._event_types if describer.describe(t) == label), None)

    def __contains__(self, event_type: object) -> bool:
        return event_type in self._event_types

    def __iter__(self) -> Iterator[EventClass]:
        return iter(self._event_types)

    def __len__(self) -> int:
        return len(self._event_types)

    def __repr__(self) -> str:
        names = ", ".join(t.__name__ for t in self._event_types)
        return f"{type(self).__name__}({names})"


__all__ = ["EventTypeRegistry"]
