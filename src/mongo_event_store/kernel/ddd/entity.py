"""Entity base class."""

from __future__ import annotations

from mongo_event_store.kernel.types.ids import EntityId


class Entity:
    """Something with an identity; two entities of one type are equal when their ids are."""

    def __init__(self, id: EntityId) -> None:  # noqa: A002
        self._id = id

    @property
    def id(self) -> EntityId:
        return self._id

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other._id == self._id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._id))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._id}>"


__all__ = ["Entity"]
