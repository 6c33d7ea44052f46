"""Kernel time – splitting instants into (seconds string, microseconds).

The stored ``recordedAt`` string only has second resolution, so the
sub-second component travels in a separate integer field. Both halves
are required to rebuild the original instant.
"""
from __future__ import annotations

from datetime import UTC, datetime

MAX_MICROSECONDS = 999_999


def split_recorded_at(moment: datetime) -> tuple[str, int]:
    """Return ``(iso_seconds, microseconds)`` for *moment*.

    The string is always rendered in UTC (``+00:00``) so that ordering
    the stored strings lexicographically is chronological. Naive
    datetimes are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    moment = moment.astimezone(UTC)
    return moment.isoformat(timespec="seconds"), moment.microsecond


def join_recorded_at(recorded_at: str, microseconds: int) -> datetime:
    """Rebuild the precise instant from its stored halves.

    Any numeric UTC offset in *recorded_at* is honoured. A fractional
    part in the string, if present, is discarded in favour of
    *microseconds*.

    Raises:
        ValueError: *recorded_at* is not ISO-8601 or *microseconds* is
            outside ``[0, 999999]``.
    """
    if isinstance(microseconds, bool) or not isinstance(microseconds, int):
        raise ValueError(f"microseconds must be an int, got {microseconds!r}")
    if not 0 <= microseconds <= MAX_MICROSECONDS:
        raise ValueError(
            f"microseconds must be within [0, {MAX_MICROSECONDS}], got {microseconds}"
        )
    parsed = datetime.fromisoformat(recorded_at)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.replace(microsecond=microseconds)


__all__ = ["MAX_MICROSECONDS", "join_recorded_at", "split_recorded_at"]
