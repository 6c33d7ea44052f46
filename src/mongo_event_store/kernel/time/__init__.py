"""Kernel time – Clock port and timestamp precision helpers."""
from mongo_event_store.kernel.time.clock import Clock, FrozenClock, SystemClock, utc_now
from mongo_event_store.kernel.time.precision import (
    MAX_MICROSECONDS,
    join_recorded_at,
    split_recorded_at,
)

__all__ = [
    "MAX_MICROSECONDS",
    "Clock",
    "FrozenClock",
    "SystemClock",
    "join_recorded_at",
    "split_recorded_at",
    "utc_now",
]
