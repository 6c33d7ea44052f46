"""Observability – structured logging helpers."""
from mongo_event_store.observability.logging.factory import configure_logging
from mongo_event_store.observability.logging.processors import get_logger

__all__ = ["configure_logging", "get_logger"]
