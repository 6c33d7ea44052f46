"""Domain errors raised by aggregates and value objects."""

from __future__ import annotations

from typing import Any

from mongo_event_store.kernel.errors.base import BaseError


class DomainError(BaseError):
    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """A command or a replayed event would break an aggregate's rules.

    ``aggregate`` names the aggregate type when known.
    """

    default_code = "invariant_violation"

    def __init__(self, message: str, *, aggregate: str | None = None, **kwargs: Any) -> None:
        if aggregate is not None:
            kwargs["detail"] = {**kwargs.get("detail", {}), "aggregate": aggregate}
        super().__init__(message, **kwargs)
        self.aggregate = aggregate


class ValidationError(DomainError):
    """A value object was given a value it cannot hold.

    ``field`` names the offending attribute when known.
    """

    default_code = "validation_error"

    def __init__(self, message: str, *, field: str | None = None, **kwargs: Any) -> None:
        if field is not None:
            kwargs["detail"] = {**kwargs.get("detail", {}), "field": field}
        super().__init__(message, **kwargs)
        self.field = field


__all__ = ["DomainError", "InvariantViolationError", "ValidationError"]
