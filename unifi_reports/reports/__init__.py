"""Historical statistics reports for controller sites.

This package validates report parameters against the controller's closed
vocabularies, applies the default window and attribute policies, and sends
the resulting query through an injected site-scoped transport.

Public API
----------
SiteReportService
    Validates parameters and dispatches report requests.
fetch_site_report
    One-shot helper around :class:`SiteReportService`.
resolve_report_query
    Pure validation and normalization of report parameters.
SiteRequestTransport
    Protocol for the site-scoped request capability.
ReportInterval, ReportType, ReportAttribute
    Closed token vocabularies.
ReportEnvelope
    Decoded report response.
SiteReportError
    Base class for validation errors.

Examples
--------
>>> from unifi_reports.reports import SiteReportService
>>> service = SiteReportService(controller)
>>> envelope = service.fetch_site_report("default", None, None, "hourly", "site")
>>> envelope.data[0]["num_sta"]
12

"""

from __future__ import annotations

from .defaults import ReportWindow, default_attributes, default_window
from .errors import (
    InvalidAttributeError,
    InvalidIntervalError,
    InvalidReportTypeError,
    InvalidTimeRangeError,
    SiteReportError,
)
from .models import (
    ReportEnvelope,
    ReportQuery,
    ReportRequestBody,
    SiteReport,
    report_path,
)
from .protocol import SiteRequestTransport
from .service import (
    SiteReportService,
    build_request_body,
    encode_request_body,
    fetch_site_report,
)
from .validation import resolve_report_query
from .vocabulary import (
    DEFAULT_REPORT_ATTRIBUTES,
    SPEEDTEST_REPORT_ATTRIBUTES,
    ReportAttribute,
    ReportInterval,
    ReportType,
)

__all__ = [
    "DEFAULT_REPORT_ATTRIBUTES",
    "SPEEDTEST_REPORT_ATTRIBUTES",
    "InvalidAttributeError",
    "InvalidIntervalError",
    "InvalidReportTypeError",
    "InvalidTimeRangeError",
    "ReportAttribute",
    "ReportEnvelope",
    "ReportInterval",
    "ReportQuery",
    "ReportRequestBody",
    "ReportType",
    "ReportWindow",
    "SiteReport",
    "SiteReportError",
    "SiteReportService",
    "SiteRequestTransport",
    "build_request_body",
    "default_attributes",
    "default_window",
    "encode_request_body",
    "fetch_site_report",
    "report_path",
    "resolve_report_query",
]
