"""Observability – structured logging."""
from mongo_event_store.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
