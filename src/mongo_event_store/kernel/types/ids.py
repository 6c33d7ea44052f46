"""Aggregate identity."""

from __future__ import annotations

import dataclasses
import uuid

from mongo_event_store.kernel.errors.domain import ValidationError


@dataclasses.dataclass(frozen=True, slots=True)
class EntityId:
    """Opaque, non-blank identifier of an entity or aggregate root.

    ``str(entity_id)`` is the canonical form; the event store writes it
    to ``aggregateRootId`` and filters on it when loading.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                f"{type(self).__name__} value must be a str, got {type(self.value).__name__}",
                field="value",
            )
        if not self.value.strip():
            raise ValidationError(f"{type(self).__name__} must not be blank", field="value")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> EntityId:
        return cls(str(uuid.uuid4()))

    @classmethod
    def coerce(cls, value: str | EntityId) -> EntityId:
        """Return *value* unchanged if it already is an id, else wrap it."""
        return value if isinstance(value, EntityId) else cls(value)


__all__ = ["EntityId"]
