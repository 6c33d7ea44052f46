"""Infrastructure errors – the backing store failed us."""

from __future__ import annotations

from mongo_event_store.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """An I/O failure against storage, not a broken business rule."""

    default_code = "infrastructure_error"


__all__ = ["InfrastructureError"]
