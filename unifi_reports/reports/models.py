"""Typed request and response structures for site reports."""

from __future__ import annotations

import dataclasses
import typing as typ

import msgspec

from unifi_reports.controller.models import ResponseMeta

if typ.TYPE_CHECKING:
    import datetime as dt

    from .vocabulary import ReportAttribute, ReportInterval, ReportType

SiteReport = dict[str, typ.Any]


@dataclasses.dataclass(frozen=True, slots=True)
class ReportQuery:
    """A validated report query with defaults and overrides applied."""

    site: str
    start: dt.datetime
    end: dt.datetime
    interval: ReportInterval
    report_type: ReportType
    attributes: tuple[ReportAttribute, ...]
    macs: tuple[str, ...] = ()

    @property
    def path(self) -> str:
        """Return the site-relative endpoint path for this query."""
        return report_path(self.interval, self.report_type)


class ReportRequestBody(msgspec.Struct, kw_only=True, omit_defaults=True):
    """JSON body sent to the report endpoint.

    ``macs`` is omitted from the encoded body when no device filter is set.
    """

    attributes: list[str]
    start: int
    end: int
    macs: list[str] = msgspec.field(default_factory=list)


class ReportEnvelope(msgspec.Struct, kw_only=True):
    """Decoded report response.

    Attributes
    ----------
    meta : ResponseMeta
        Controller response metadata.
    data : list[dict[str, Any]]
        Report records in controller order, passed through untyped.

    """

    meta: ResponseMeta
    data: list[SiteReport] = msgspec.field(default_factory=list)


def report_path(interval: str, report_type: str) -> str:
    """Return ``stat/report/<interval>.<report_type>``.

    Examples
    --------
    >>> report_path("hourly", "ap")
    'stat/report/hourly.ap'

    """
    return f"stat/report/{interval}.{report_type}"
