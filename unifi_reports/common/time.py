"""Common time utilities."""

from __future__ import annotations

import datetime as dt


def utcnow() -> dt.datetime:
    """Return an aware UTC timestamp."""
    return dt.datetime.now(dt.UTC)


def ensure_tzaware(value: dt.datetime, *, field: str) -> dt.datetime:
    """Return ``value`` converted to UTC, rejecting naive datetimes."""
    if value.tzinfo is None:
        msg = f"{field} must be timezone-aware"
        raise ValueError(msg)
    return value.astimezone(dt.UTC)


def to_epoch_millis(value: dt.datetime) -> int:
    """Return whole-second epoch milliseconds for an aware datetime.

    The controller's report endpoint works at one-second resolution, so any
    sub-second component is truncated before scaling.

    Examples
    --------
    >>> to_epoch_millis(dt.datetime(2024, 7, 1, 0, 0, 1, 500000, tzinfo=dt.UTC))
    1719792001000

    """
    return int(value.astimezone(dt.UTC).timestamp()) * 1000
