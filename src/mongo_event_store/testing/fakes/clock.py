"""Testing fakes – a FrozenClock with a known starting point."""
from __future__ import annotations

from datetime import UTC, datetime

from mongo_event_store.kernel.time import FrozenClock

EPOCH = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


def FakeClock(at: datetime = EPOCH) -> FrozenClock:
    """``FrozenClock`` starting at *at* (``2026-01-01T12:00:00+00:00`` by default)."""
    return FrozenClock(at)


__all__ = ["EPOCH", "FakeClock"]
