"""Validation and normalization of caller-supplied report parameters.

Checks run in a fixed order and the first failure wins:

1. the window must be strictly ordered (after applying the default window
   when both bounds are unset);
2. the report type must be known;
3. speedtest reports are forced onto the ``archive`` interval;
4. the (possibly overridden) interval must be known;
5. every caller-supplied attribute must be known.

Because the speedtest override happens before the interval check, an unknown
interval on a speedtest request is discarded rather than rejected.
"""

from __future__ import annotations

import typing as typ

from unifi_reports.common.time import ensure_tzaware, to_epoch_millis, utcnow

from .defaults import default_attributes, default_window
from .errors import (
    InvalidAttributeError,
    InvalidIntervalError,
    InvalidReportTypeError,
    InvalidTimeRangeError,
)
from .models import ReportQuery
from .vocabulary import ReportAttribute, ReportInterval, ReportType

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import datetime as dt


def _resolve_window(
    start: dt.datetime | None,
    end: dt.datetime | None,
    interval: str,
    now: cabc.Callable[[], dt.datetime],
) -> tuple[dt.datetime, dt.datetime]:
    if start is None and end is None:
        window = default_window(interval, now=now)
        if window is None:
            raise InvalidTimeRangeError.not_ordered(None, None)
        return window.start, window.end
    if start is None:
        raise InvalidTimeRangeError.incomplete("start")
    if end is None:
        raise InvalidTimeRangeError.incomplete("end")

    try:
        start_utc = ensure_tzaware(start, field="start")
        end_utc = ensure_tzaware(end, field="end")
    except ValueError as exc:
        field = "start" if start.tzinfo is None else "end"
        raise InvalidTimeRangeError.naive(field) from exc

    # Bounds are sent at whole-second resolution.
    if not to_epoch_millis(start_utc) < to_epoch_millis(end_utc):
        raise InvalidTimeRangeError.not_ordered(start_utc, end_utc)
    return start_utc, end_utc


def _resolve_attributes(
    attributes: cabc.Sequence[str],
    report_type: ReportType,
) -> tuple[ReportAttribute, ...]:
    if not attributes:
        return default_attributes(report_type)
    for attribute in attributes:
        if not ReportAttribute.is_valid(attribute):
            raise InvalidAttributeError(attribute)
    return tuple(ReportAttribute(attribute) for attribute in attributes)


def resolve_report_query(  # noqa: PLR0913
    site: str,
    start: dt.datetime | None,
    end: dt.datetime | None,
    interval: str,
    report_type: str,
    attributes: cabc.Sequence[str] = (),
    *filter_macs: str,
    now: cabc.Callable[[], dt.datetime] = utcnow,
) -> ReportQuery:
    """Validate report parameters and return the query to dispatch.

    Parameters
    ----------
    site
        Controller site name, for example ``"default"``.
    start, end
        Timezone-aware window bounds. Pass ``None`` for both to request the
        default window for ``interval``.
    interval
        Report interval token; see :class:`ReportInterval`.
    report_type
        Report type token; see :class:`ReportType`.
    attributes
        Attribute tokens to request. An empty sequence selects the default
        set for ``report_type``.
    *filter_macs
        Optional device MAC addresses restricting the report.
    now
        Clock used to compute the default window.

    Returns
    -------
    ReportQuery
        The validated query with defaults and overrides applied.

    Raises
    ------
    InvalidTimeRangeError
        If the resolved window is not strictly ordered.
    InvalidReportTypeError
        If ``report_type`` is unknown.
    InvalidIntervalError
        If ``interval`` is unknown and the report is not a speedtest.
    InvalidAttributeError
        If any supplied attribute is unknown.

    """
    window_start, window_end = _resolve_window(start, end, interval, now)

    if not ReportType.is_valid(report_type):
        raise InvalidReportTypeError(report_type)
    resolved_type = ReportType(report_type)

    # Only archive is supported for speedtest reports.
    if resolved_type is ReportType.SPEEDTEST:
        interval = ReportInterval.ARCHIVE

    if not ReportInterval.is_valid(interval):
        raise InvalidIntervalError(interval)

    return ReportQuery(
        site=site,
        start=window_start,
        end=window_end,
        interval=ReportInterval(interval),
        report_type=resolved_type,
        attributes=_resolve_attributes(attributes, resolved_type),
        macs=tuple(filter_macs),
    )
