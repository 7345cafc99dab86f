"""Errors raised by the UniFi controller client."""

from __future__ import annotations

# Body preview length for error messages
_BODY_PREVIEW_LIMIT = 100


class ControllerError(Exception):
    """Base exception for all controller client errors."""


class ControllerAPIError(ControllerError):
    """Raised when the controller rejects a request or cannot be reached.

    Attributes
    ----------
    status_code
        HTTP status code of the response, if one was received.

    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Initialise with a message and optional HTTP status code."""
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def http_error(
        cls, status_code: int, path: str, message: str | None = None
    ) -> ControllerAPIError:
        """Return an error for non-2xx HTTP responses.

        ``message`` is the controller's ``meta.msg`` key when the error body
        carried one.
        """
        detail = f": {message}" if message else ""
        return cls(
            f"controller HTTP {status_code} for {path}{detail}",
            status_code=status_code,
        )

    @classmethod
    def api_error(cls, message: str | None, path: str) -> ControllerAPIError:
        """Return an error for a response whose ``meta.rc`` is ``error``."""
        detail = message or "unknown error"
        return cls(f"controller returned error for {path}: {detail}")

    @classmethod
    def login_failed(
        cls, status_code: int, message: str | None = None
    ) -> ControllerAPIError:
        """Return an error for a rejected login."""
        detail = f" ({message})" if message else ""
        return cls(
            f"controller login failed: HTTP {status_code}{detail}",
            status_code=status_code,
        )

    @classmethod
    def timeout(cls) -> ControllerAPIError:
        """Return an error for a request that timed out."""
        return cls("controller request timed out")

    @classmethod
    def network_error(cls, detail: str) -> ControllerAPIError:
        """Return an error for DNS, connection or TLS failures."""
        return cls(f"controller network error: {detail}")


class ControllerResponseShapeError(ControllerError):
    """Raised when a controller response cannot be decoded."""

    @classmethod
    def invalid_json(cls, content: bytes, detail: str) -> ControllerResponseShapeError:
        """Return an error with a truncated preview of the offending body."""
        text = content.decode("utf-8", errors="replace")
        if len(text) > _BODY_PREVIEW_LIMIT:
            text = text[:_BODY_PREVIEW_LIMIT] + "..."
        return cls(f"failed to decode controller response ({detail}): {text}")


class ControllerConfigError(ControllerError):
    """Raised when controller client configuration is invalid."""

    @classmethod
    def missing(cls, env_var: str) -> ControllerConfigError:
        """Return an error for a required environment variable that is unset."""
        return cls(f"{env_var} environment variable is required")

    @classmethod
    def empty(cls, field: str) -> ControllerConfigError:
        """Return an error for a required value that is blank."""
        return cls(f"controller {field} must be non-empty")

    @classmethod
    def invalid_parameter(
        cls, parameter_name: str, value: str, constraint: str
    ) -> ControllerConfigError:
        """Return an error for a configuration value outside its constraint."""
        return cls(f"Invalid {parameter_name} '{value}'. {constraint}")
