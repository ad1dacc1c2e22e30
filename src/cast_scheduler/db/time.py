# src/cast_scheduler/db/time.py
"""Time utilities for scheduling operations."""

from datetime import UTC, datetime

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def unix_seconds(moment: datetime) -> int:
    """Return whole seconds since the unix epoch, or 0 for pre-epoch moments.

    Naive datetimes are interpreted as UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    delta = moment - _EPOCH
    micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
    if micros < 0:
        return 0
    return micros // 1_000_000


def now_unix_seconds(now: datetime | None = None) -> int:
    """Return the unix-seconds value for ``now`` (captured once) or the current time."""
    return unix_seconds(now if now is not None else utcnow())
