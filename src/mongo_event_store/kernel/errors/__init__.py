"""Kernel errors.

::

    BaseError
    ├── DomainError
    │   ├── InvariantViolationError   aggregate rules
    │   └── ValidationError           value objects
    ├── ApplicationError              configuration
    └── InfrastructureError           storage I/O
        └── EventStoreError           (application.event_sourcing.errors)
"""

from mongo_event_store.kernel.errors.application import ApplicationError
from mongo_event_store.kernel.errors.base import BaseError
from mongo_event_store.kernel.errors.domain import (
    DomainError,
    InvariantViolationError,
    ValidationError,
)
from mongo_event_store.kernel.errors.infrastructure import InfrastructureError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvariantViolationError",
    "ValidationError",
]
