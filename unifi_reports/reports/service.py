"""Request assembly and dispatch for site statistics reports."""

from __future__ import annotations

import typing as typ

import msgspec

from unifi_reports.common.time import to_epoch_millis, utcnow

from .models import ReportEnvelope, ReportRequestBody
from .validation import resolve_report_query

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import datetime as dt

    from .models import ReportQuery
    from .protocol import SiteRequestTransport

_REPORT_METHOD = "GET"


def build_request_body(query: ReportQuery) -> ReportRequestBody:
    """Return the request body for a validated query."""
    return ReportRequestBody(
        attributes=[str(attribute) for attribute in query.attributes],
        start=to_epoch_millis(query.start),
        end=to_epoch_millis(query.end),
        macs=list(query.macs),
    )


def encode_request_body(query: ReportQuery) -> bytes:
    """Return the JSON-encoded request body for a validated query."""
    return msgspec.json.encode(build_request_body(query))


class SiteReportService:
    """Fetch historical site statistics through a controller transport.

    The service holds no state besides the injected transport, so a single
    instance may be shared between callers.

    Parameters
    ----------
    transport
        Site-scoped request capability, usually a
        :class:`~unifi_reports.controller.ControllerClient`.
    now
        Clock used when a default window is requested.

    """

    def __init__(
        self,
        transport: SiteRequestTransport,
        *,
        now: cabc.Callable[[], dt.datetime] = utcnow,
    ) -> None:
        """Initialise the service with its transport."""
        self._transport = transport
        self._now = now

    def fetch_site_report(  # noqa: PLR0913
        self,
        site: str,
        start: dt.datetime | None,
        end: dt.datetime | None,
        interval: str,
        report_type: str,
        attributes: cabc.Sequence[str] = (),
        *filter_macs: str,
    ) -> ReportEnvelope:
        """Validate the parameters, send the report request and decode it.

        Parameters are documented on
        :func:`~unifi_reports.reports.validation.resolve_report_query`.

        Returns
        -------
        ReportEnvelope
            Response metadata and the report records in controller order.

        Raises
        ------
        SiteReportError
            If validation fails; the transport is not invoked.

        """
        query = resolve_report_query(
            site,
            start,
            end,
            interval,
            report_type,
            attributes,
            *filter_macs,
            now=self._now,
        )
        return self.dispatch(query)

    def dispatch(self, query: ReportQuery) -> ReportEnvelope:
        """Send an already validated query and return the decoded envelope."""
        return self._transport.site_request(
            _REPORT_METHOD,
            query.site,
            query.path,
            encode_request_body(query),
            target=ReportEnvelope,
        )


def fetch_site_report(  # noqa: PLR0913
    transport: SiteRequestTransport,
    site: str,
    start: dt.datetime | None,
    end: dt.datetime | None,
    interval: str,
    report_type: str,
    attributes: cabc.Sequence[str] = (),
    *filter_macs: str,
) -> ReportEnvelope:
    """Fetch a site report through ``transport`` in a single call."""
    return SiteReportService(transport).fetch_site_report(
        site, start, end, interval, report_type, attributes, *filter_macs
    )
