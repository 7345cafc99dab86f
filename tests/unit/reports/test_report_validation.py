"""Unit tests for report parameter validation and normalization."""

from __future__ import annotations

import datetime as dt

import pytest

from unifi_reports.reports import (
    DEFAULT_REPORT_ATTRIBUTES,
    SPEEDTEST_REPORT_ATTRIBUTES,
    InvalidAttributeError,
    InvalidIntervalError,
    InvalidReportTypeError,
    InvalidTimeRangeError,
    ReportAttribute,
    ReportInterval,
    ReportType,
    SiteReportError,
    resolve_report_query,
)

T0 = dt.datetime(2024, 7, 1, tzinfo=dt.UTC)
T1 = dt.datetime(2024, 7, 2, tzinfo=dt.UTC)


class TestTimeRange:
    """Tests for window ordering and default window resolution."""

    @pytest.mark.parametrize(
        ("start", "end"),
        [(T1, T0), (T0, T0)],
        ids=["inverted", "equal"],
    )
    def test_rejects_unordered_window(
        self, start: dt.datetime, end: dt.datetime
    ) -> None:
        """Start must be strictly before end."""
        with pytest.raises(InvalidTimeRangeError, match="must occur after start"):
            resolve_report_query("site1", start, end, "daily", "site")

    def test_default_window_for_five_minutes(self, fixed_now: dt.datetime) -> None:
        """Unset bounds resolve to the last hour for 5minutes reports."""
        query = resolve_report_query(
            "site1", None, None, "5minutes", "site", now=lambda: fixed_now
        )

        assert query.end == fixed_now, "Default window should end now"
        assert query.start == fixed_now - dt.timedelta(hours=1), (
            "Default 5minutes window should start an hour ago"
        )

    def test_daily_default_window_is_last_week(self, fixed_now: dt.datetime) -> None:
        """The daily default looks back seven days rather than forward."""
        query = resolve_report_query(
            "site1", None, None, "daily", "site", now=lambda: fixed_now
        )

        assert query.start == fixed_now - dt.timedelta(days=7)
        assert query.end == fixed_now

    def test_archive_without_window_fails(self, fixed_now: dt.datetime) -> None:
        """Archive has no default window, so unset bounds fail ordering."""
        with pytest.raises(InvalidTimeRangeError):
            resolve_report_query(
                "site1", None, None, "archive", "site", now=lambda: fixed_now
            )

    def test_speedtest_default_window_uses_caller_interval(
        self, fixed_now: dt.datetime
    ) -> None:
        """Defaults key on the caller interval before the speedtest override."""
        query = resolve_report_query(
            "site1", None, None, "hourly", "speedtest", now=lambda: fixed_now
        )

        assert query.start == fixed_now - dt.timedelta(hours=24)
        assert query.interval is ReportInterval.ARCHIVE

    @pytest.mark.parametrize(
        ("start", "end", "missing"),
        [(None, T1, "start"), (T0, None, "end")],
        ids=["missing-start", "missing-end"],
    )
    def test_rejects_partial_window(
        self, start: dt.datetime | None, end: dt.datetime | None, missing: str
    ) -> None:
        """A window with only one bound is rejected."""
        with pytest.raises(InvalidTimeRangeError, match=f"{missing} must be set"):
            resolve_report_query("site1", start, end, "hourly", "site")

    def test_rejects_naive_datetimes(self) -> None:
        """Bounds must carry a timezone."""
        with pytest.raises(InvalidTimeRangeError, match="start must be timezone-aware"):
            resolve_report_query(
                "site1", dt.datetime(2024, 7, 1), T1, "hourly", "site"  # noqa: DTZ001
            )

    def test_normalizes_bounds_to_utc(self) -> None:
        """Aware bounds in other zones are converted to UTC."""
        plus_two = dt.timezone(dt.timedelta(hours=2))
        start = dt.datetime(2024, 7, 1, 2, 0, tzinfo=plus_two)

        query = resolve_report_query("site1", start, T1, "hourly", "site")

        assert query.start == T0
        assert query.start.tzinfo == dt.UTC

    def test_time_range_checked_before_report_type(self) -> None:
        """The first failing check wins."""
        with pytest.raises(InvalidTimeRangeError):
            resolve_report_query("site1", T1, T0, "bogus", "bogus", ["bogus"])


class TestReportTypeAndInterval:
    """Tests for report type and interval membership."""

    def test_rejects_unknown_report_type(self) -> None:
        """Unknown report types are rejected with the offending value."""
        with pytest.raises(InvalidReportTypeError) as exc_info:
            resolve_report_query("site1", T0, T1, "hourly", "gateway")

        assert exc_info.value.value == "gateway"
        assert "gateway" in str(exc_info.value)

    def test_report_type_checked_before_interval(self) -> None:
        """An invalid report type is reported ahead of an invalid interval."""
        with pytest.raises(InvalidReportTypeError):
            resolve_report_query("site1", T0, T1, "weekly", "gateway")

    def test_rejects_unknown_interval(self) -> None:
        """Unknown intervals are rejected with the offending value."""
        with pytest.raises(InvalidIntervalError) as exc_info:
            resolve_report_query("site1", T0, T1, "weekly", "site")

        assert exc_info.value.value == "weekly"
        assert "invalid interval specified: weekly" in str(exc_info.value)

    @pytest.mark.parametrize("interval", ["hourly", "daily", "weekly", ""])
    def test_speedtest_forces_archive(self, interval: str) -> None:
        """Speedtest always uses archive, even over an invalid interval."""
        query = resolve_report_query("site1", T0, T1, interval, "speedtest")

        assert query.interval is ReportInterval.ARCHIVE
        assert query.path == "stat/report/archive.speedtest"

    @pytest.mark.parametrize("interval", list(ReportInterval))
    @pytest.mark.parametrize(
        "report_type", [t for t in ReportType if t is not ReportType.SPEEDTEST]
    )
    def test_accepts_every_valid_combination(
        self, interval: ReportInterval, report_type: ReportType
    ) -> None:
        """Valid vocabularies never raise for an ordered window."""
        query = resolve_report_query(
            "site1", T0, T1, str(interval), str(report_type), ["bytes"]
        )

        assert query.interval is interval
        assert query.report_type is report_type
        assert query.path == f"stat/report/{interval}.{report_type}"


class TestAttributes:
    """Tests for attribute validation and defaults."""

    @pytest.mark.parametrize("report_type", ["site", "user", "ap"])
    def test_empty_attributes_use_general_defaults(self, report_type: str) -> None:
        """Non-speedtest reports default to the general attribute set."""
        query = resolve_report_query("site1", T0, T1, "hourly", report_type, [])

        assert query.attributes == DEFAULT_REPORT_ATTRIBUTES

    def test_empty_attributes_use_speedtest_defaults(self) -> None:
        """Speedtest reports default to throughput and latency attributes."""
        query = resolve_report_query("site1", T0, T1, "hourly", "speedtest", [])

        assert query.attributes == SPEEDTEST_REPORT_ATTRIBUTES

    def test_supplied_attributes_are_kept_in_order(self) -> None:
        """Caller attributes replace the defaults and keep their order."""
        query = resolve_report_query(
            "site1", T0, T1, "hourly", "ap", ["tx_bytes", "rx_bytes", "time"]
        )

        assert query.attributes == (
            ReportAttribute.TX_BYTES,
            ReportAttribute.RX_BYTES,
            ReportAttribute.TIME,
        )

    def test_names_first_invalid_attribute(self) -> None:
        """The first unknown attribute is reported."""
        with pytest.raises(InvalidAttributeError) as exc_info:
            resolve_report_query(
                "site1", T0, T1, "hourly", "site", ["bytes", "bogus", "worse"]
            )

        assert exc_info.value.value == "bogus"
        assert str(exc_info.value) == "invalid report attribute specified: bogus"

    def test_not_a_real_attr_rejected(self) -> None:
        """Unknown attributes fail even when everything else is valid."""
        with pytest.raises(InvalidAttributeError, match="not_a_real_attr"):
            resolve_report_query("site1", T0, T1, "daily", "user", ["not_a_real_attr"])


def test_filter_macs_are_collected() -> None:
    """Trailing positional arguments form the device filter."""
    query = resolve_report_query(
        "site1", T0, T1, "hourly", "user", (), "aa:bb:cc:dd:ee:ff", "11:22:33:44:55:66"
    )

    assert query.macs == ("aa:bb:cc:dd:ee:ff", "11:22:33:44:55:66")
    assert query.site == "site1"


@pytest.mark.parametrize(
    "error_type",
    [
        InvalidTimeRangeError,
        InvalidReportTypeError,
        InvalidIntervalError,
        InvalidAttributeError,
    ],
)
def test_errors_share_base_class(error_type: type[Exception]) -> None:
    """Every validation error is a SiteReportError and a ValueError."""
    assert issubclass(error_type, SiteReportError)
    assert issubclass(error_type, ValueError)
