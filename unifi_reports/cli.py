"""Command-line entry point for fetching a site statistics report."""

from __future__ import annotations

import argparse
import datetime as dt
import sys

import msgspec

from unifi_reports.controller import ControllerClient, ControllerConfig, ControllerError
from unifi_reports.logging import (
    configure_logging,
    format_log_message,
    get_logger,
    log_exception,
    log_warning,
)
from unifi_reports.reports import (
    ReportAttribute,
    ReportInterval,
    ReportType,
    SiteReportError,
    SiteReportService,
)

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_CONTROLLER_ERROR = 1
EXIT_INVALID_REPORT = 2


def _parse_timestamp(value: str) -> dt.datetime:
    try:
        return dt.datetime.fromisoformat(value)
    except ValueError as exc:
        msg = f"invalid ISO 8601 timestamp: {value!r}"
        raise argparse.ArgumentTypeError(msg) from exc


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for ``unifi-site-report``."""
    parser = argparse.ArgumentParser(
        prog="unifi-site-report",
        description=__doc__,
        epilog=(
            "Controller connection settings are read from UNIFI_CONTROLLER_URL, "
            "UNIFI_USERNAME, UNIFI_PASSWORD, UNIFI_OS, UNIFI_VERIFY_SSL and "
            "UNIFI_TIMEOUT_S."
        ),
    )
    parser.add_argument("site", help="Controller site name, e.g. 'default'")
    parser.add_argument(
        "--interval",
        default=ReportInterval.HOURLY.value,
        help=f"Report interval ({', '.join(ReportInterval)})",
    )
    parser.add_argument(
        "--type",
        dest="report_type",
        default=ReportType.SITE.value,
        help=f"Report type ({', '.join(ReportType)})",
    )
    parser.add_argument(
        "--attribute",
        dest="attributes",
        action="append",
        default=[],
        help=(
            "Attribute to request; repeat for several "
            f"({', '.join(ReportAttribute)}). Defaults depend on --type."
        ),
    )
    parser.add_argument(
        "--start",
        type=_parse_timestamp,
        default=None,
        help="Timezone-aware ISO 8601 window start",
    )
    parser.add_argument(
        "--end",
        type=_parse_timestamp,
        default=None,
        help="Timezone-aware ISO 8601 window end",
    )
    parser.add_argument(
        "--mac",
        dest="macs",
        action="append",
        default=[],
        help="Restrict the report to a device MAC; repeat for several",
    )
    parser.add_argument("--log-level", default="WARNING", help="Log level")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Fetch a report and print the decoded envelope as JSON.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        Exit code: 0 on success, 1 on controller errors, 2 when the report
        parameters are invalid.

    """
    args = build_parser().parse_args(argv)
    level, invalid_level = configure_logging(args.log_level)
    if invalid_level:
        log_warning(logger, "Unknown log level %r; using %s", args.log_level, level)

    try:
        config = ControllerConfig.from_env()
        with ControllerClient(config) as client:
            envelope = SiteReportService(client).fetch_site_report(
                args.site,
                args.start,
                args.end,
                args.interval,
                args.report_type,
                args.attributes,
                *args.macs,
            )
    except SiteReportError as exc:
        print(f"invalid report request: {exc}", file=sys.stderr)
        return EXIT_INVALID_REPORT
    except ControllerError as exc:
        log_exception(
            logger,
            format_log_message("Report request for site %s failed", args.site),
            exc,
        )
        print(f"controller error: {exc}", file=sys.stderr)
        return EXIT_CONTROLLER_ERROR

    sys.stdout.write(msgspec.json.format(msgspec.json.encode(envelope)).decode())
    sys.stdout.write("\n")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
