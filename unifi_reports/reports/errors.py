"""Validation errors raised before a report request is dispatched."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import datetime as dt


class SiteReportError(ValueError):
    """Base class for site report validation errors.

    All subclasses are raised synchronously before the transport is invoked,
    so a caught ``SiteReportError`` guarantees no request was sent.
    """


class InvalidTimeRangeError(SiteReportError):
    """Raised when the resolved report window is not strictly ordered."""

    @classmethod
    def not_ordered(
        cls, start: dt.datetime | None, end: dt.datetime | None
    ) -> InvalidTimeRangeError:
        """Return an error for a window whose start is not before its end."""
        start_text = start.isoformat() if start is not None else "unset"
        end_text = end.isoformat() if end is not None else "unset"
        return cls(
            "invalid end time, must occur after start time "
            f"(start={start_text}, end={end_text})"
        )

    @classmethod
    def incomplete(cls, missing: str) -> InvalidTimeRangeError:
        """Return an error for a window with only one bound supplied."""
        return cls(f"invalid time range: {missing} must be set when the other is")

    @classmethod
    def naive(cls, field: str) -> InvalidTimeRangeError:
        """Return an error for a timezone-unaware bound."""
        return cls(f"invalid time range: {field} must be timezone-aware")


class _InvalidTokenError(SiteReportError):
    """Base for errors naming a rejected vocabulary token."""

    kind: typ.ClassVar[str] = "token"

    def __init__(self, value: object) -> None:
        """Initialise with the offending token."""
        self.value = value
        super().__init__(f"invalid {self.kind} specified: {value}")


class InvalidReportTypeError(_InvalidTokenError):
    """Raised when the report type is outside the report type vocabulary."""

    kind = "reportType"


class InvalidIntervalError(_InvalidTokenError):
    """Raised when the interval is outside the interval vocabulary."""

    kind = "interval"


class InvalidAttributeError(_InvalidTokenError):
    """Raised for the first attribute outside the attribute vocabulary."""

    kind = "report attribute"
