"""Kernel value types: aggregate identity and operation results."""

from mongo_event_store.kernel.types.ids import EntityId
from mongo_event_store.kernel.types.result import Err, Ok, Result

__all__ = ["EntityId", "Err", "Ok", "Result"]
