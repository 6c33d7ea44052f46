"""Application event sourcing – describers map event classes to stored labels."""

from __future__ import annotations

from typing import Any, Protocol

from mongo_event_store.kernel.naming import to_kebab_case


class EventDescriber(Protocol):
    """Port — deterministic label for an event class or instance.

    Labels are persisted, so a describer must return the same label for
    the same class across process restarts.
    """

    def describe(self, event: Any) -> str: ...


def _class_of(event: Any) -> type:
    return event if isinstance(event, type) else type(event)


class KebabCaseDescriber:
    """``InvoiceWasCreated`` → ``"invoice-was-created"``."""

    def describe(self, event: Any) -> str:
        return to_kebab_case(_class_of(event).__name__)


class ClassNameDescriber:
    """``InvoiceWasCreated`` → ``"InvoiceWasCreated"``."""

    def describe(self, event: Any) -> str:
        return _class_of(event).__name__


__all__ = ["ClassNameDescriber", "EventDescriber", "KebabCaseDescriber"]
