"""Closed token vocabularies for controller statistics reports.

The controller addresses reports as ``stat/report/<interval>.<type>`` and
accepts a list of attribute names in the request body. Each vocabulary is a
``StrEnum`` so members serialize as their raw token, and each exposes an
exact-match ``is_valid`` predicate for validating caller-supplied strings.

Examples
--------
>>> ReportInterval.is_valid("hourly")
True
>>> ReportInterval.is_valid("Hourly")
False
>>> ReportType("speedtest") is ReportType.SPEEDTEST
True

"""

from __future__ import annotations

import enum


class _TokenVocabulary(enum.StrEnum):
    """Base for closed string vocabularies with a membership predicate."""

    @classmethod
    def is_valid(cls, token: object) -> bool:
        """Return True when ``token`` exactly matches a member value.

        No case folding or whitespace trimming is applied.
        """
        return isinstance(token, str) and token in cls._value2member_map_


class ReportInterval(_TokenVocabulary):
    """Statistical bucket granularity of a report."""

    FIVE_MINUTES = "5minutes"
    HOURLY = "hourly"
    DAILY = "daily"
    ARCHIVE = "archive"


class ReportType(_TokenVocabulary):
    """Subject of a report."""

    SITE = "site"
    USER = "user"
    AP = "ap"
    SPEEDTEST = "speedtest"


class ReportAttribute(_TokenVocabulary):
    """Metric that may be requested in a report."""

    BYTES = "bytes"
    WAN_TX_BYTES = "wan-tx_bytes"
    WAN_RX_BYTES = "wan-rx_bytes"
    WLAN_BYTES = "wlan_bytes"
    NUM_STA = "num_sta"
    LAN_NUM_STA = "lan-num_sta"
    WLAN_NUM_STA = "wlan-num_sta"
    TIME = "time"
    RX_BYTES = "rx_bytes"
    TX_BYTES = "tx_bytes"
    SPEEDTEST_DOWNLOAD = "xput_download"
    SPEEDTEST_UPLOAD = "xput_upload"
    SPEEDTEST_LATENCY = "latency"


DEFAULT_REPORT_ATTRIBUTES: tuple[ReportAttribute, ...] = (
    ReportAttribute.BYTES,
    ReportAttribute.WAN_TX_BYTES,
    ReportAttribute.WAN_RX_BYTES,
    ReportAttribute.WLAN_BYTES,
    ReportAttribute.NUM_STA,
    ReportAttribute.LAN_NUM_STA,
    ReportAttribute.WLAN_NUM_STA,
    ReportAttribute.TIME,
    ReportAttribute.RX_BYTES,
    ReportAttribute.TX_BYTES,
)

SPEEDTEST_REPORT_ATTRIBUTES: tuple[ReportAttribute, ...] = (
    ReportAttribute.SPEEDTEST_DOWNLOAD,
    ReportAttribute.SPEEDTEST_UPLOAD,
    ReportAttribute.SPEEDTEST_LATENCY,
    ReportAttribute.TIME,
)
