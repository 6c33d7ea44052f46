"""Kernel – aggregates, events, identities and errors, free of any storage concern."""

from mongo_event_store.kernel.ddd import AggregateRoot, DomainEvent, Entity
from mongo_event_store.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    InvariantViolationError,
    ValidationError,
)
from mongo_event_store.kernel.types import EntityId, Err, Ok, Result

__all__ = [
    "AggregateRoot",
    "ApplicationError",
    "BaseError",
    "DomainError",
    "DomainEvent",
    "Entity",
    "EntityId",
    "Err",
    "InfrastructureError",
    "InvariantViolationError",
    "Ok",
    "Result",
    "ValidationError",
]
