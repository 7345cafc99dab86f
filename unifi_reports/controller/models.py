"""Wire structures shared by every controller API response."""

from __future__ import annotations

import msgspec

RC_OK = "ok"
RC_ERROR = "error"


class ResponseMeta(msgspec.Struct, kw_only=True):
    """Metadata block returned alongside every controller payload.

    Attributes
    ----------
    rc : str
        Result code, ``"ok"`` on success and ``"error"`` on failure.
    msg : str, optional
        Controller message key describing a failure (``api.err.*``).

    """

    rc: str
    msg: str | None = None

    @property
    def is_error(self) -> bool:
        """Return True when the controller flagged the request as failed."""
        return self.rc == RC_ERROR


class ErrorBody(msgspec.Struct, kw_only=True):
    """Minimal view of an error response, used to recover ``meta.msg``."""

    meta: ResponseMeta
