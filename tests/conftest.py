"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import datetime as dt

import pytest

from tests.helpers.site_transport import RecordingSiteTransport
from unifi_reports.reports import SiteReportService

FIXED_NOW = dt.datetime(2024, 7, 8, 12, 30, 15, tzinfo=dt.UTC)


@pytest.fixture
def fixed_now() -> dt.datetime:
    """Return the frozen clock value used for default windows."""
    return FIXED_NOW


@pytest.fixture
def sample_report_response() -> dict[str, object]:
    """Return a controller response with two hourly site records."""
    return {
        "meta": {"rc": "ok"},
        "data": [
            {
                "site": "5f1a2b3c4d5e6f7a8b9c0d1e",
                "time": 1720436400000,
                "bytes": 1234567.0,
                "num_sta": 12,
                "wlan-num_sta": 9,
                "lan-num_sta": 3,
                "o": "site",
                "oid": "5f1a2b3c4d5e6f7a8b9c0d1e",
            },
            {
                "site": "5f1a2b3c4d5e6f7a8b9c0d1e",
                "time": 1720440000000,
                "bytes": 2345678.5,
                "num_sta": 14,
                "wlan-num_sta": 10,
                "lan-num_sta": 4,
                "o": "site",
                "oid": "5f1a2b3c4d5e6f7a8b9c0d1e",
            },
        ],
    }


@pytest.fixture
def transport(sample_report_response: dict[str, object]) -> RecordingSiteTransport:
    """Return a recording transport answering with the sample response."""
    return RecordingSiteTransport(sample_report_response)


@pytest.fixture
def report_service(
    transport: RecordingSiteTransport, fixed_now: dt.datetime
) -> SiteReportService:
    """Return a report service bound to the recording transport."""
    return SiteReportService(transport, now=lambda: fixed_now)
