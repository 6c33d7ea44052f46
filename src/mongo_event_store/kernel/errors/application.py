"""Application-layer errors (configuration, wiring)."""

from __future__ import annotations

from mongo_event_store.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """The application was set up or called incorrectly."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
