"""Kernel time – where aggregates get ``recorded_at`` from."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


def utc_now() -> datetime:
    return datetime.now(UTC)


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock, timezone-aware UTC with microsecond resolution."""

    def now(self) -> datetime:
        return utc_now()


class FrozenClock:
    """Clock that only moves when told to.

    Lets tests give successive events distinct, known timestamps down to
    the microsecond::

        clock = FrozenClock(datetime(2026, 1, 1, tzinfo=UTC))
        invoice = Invoice.create("12-34", clock=clock)
        clock.advance(microseconds=1)
        invoice.start_payment_transaction("Manual", 10.0)
    """

    def __init__(self, moment: datetime) -> None:
        if moment.tzinfo is None:
            raise ValueError("FrozenClock needs a timezone-aware datetime")
        self._moment = moment

    def now(self) -> datetime:
        return self._moment

    def advance(self, **delta: float) -> datetime:
        """Move forward by ``timedelta(**delta)`` and return the new time."""
        self._moment += timedelta(**delta)
        return self._moment


__all__ = ["Clock", "FrozenClock", "SystemClock", "utc_now"]
