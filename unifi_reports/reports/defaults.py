"""Default window and attribute policies for report queries."""

from __future__ import annotations

import dataclasses
import datetime as dt
import typing as typ

from unifi_reports.common.time import utcnow

from .vocabulary import (
    DEFAULT_REPORT_ATTRIBUTES,
    SPEEDTEST_REPORT_ATTRIBUTES,
    ReportAttribute,
    ReportInterval,
    ReportType,
)

_DEFAULT_WINDOW_LENGTHS: dict[str, dt.timedelta] = {
    ReportInterval.FIVE_MINUTES: dt.timedelta(hours=1),
    ReportInterval.HOURLY: dt.timedelta(hours=24),
    ReportInterval.DAILY: dt.timedelta(days=7),
}


@dataclasses.dataclass(frozen=True, slots=True)
class ReportWindow:
    """Half-open reporting window ``[start, end)`` in UTC."""

    start: dt.datetime
    end: dt.datetime


def default_window(
    interval: str,
    *,
    now: typ.Callable[[], dt.datetime] = utcnow,
) -> ReportWindow | None:
    """Return the default window ending now for ``interval``.

    ``archive`` and unknown interval tokens have no default, in which case
    ``None`` is returned and the caller's unset bounds stay unset.

    Examples
    --------
    >>> fixed = dt.datetime(2024, 7, 8, tzinfo=dt.UTC)
    >>> default_window("hourly", now=lambda: fixed).start
    datetime.datetime(2024, 7, 7, 0, 0, tzinfo=datetime.timezone.utc)
    >>> default_window("archive", now=lambda: fixed) is None
    True

    """
    length = _DEFAULT_WINDOW_LENGTHS.get(interval)
    if length is None:
        return None
    end = now()
    return ReportWindow(start=end - length, end=end)


def default_attributes(report_type: str) -> tuple[ReportAttribute, ...]:
    """Return the attribute set requested when the caller supplies none."""
    if report_type == ReportType.SPEEDTEST:
        return SPEEDTEST_REPORT_ATTRIBUTES
    return DEFAULT_REPORT_ATTRIBUTES
